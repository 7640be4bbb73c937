"""Configuration management for the home office tracker."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import click

logger = logging.getLogger(__name__)

APP_NAME = "home_office_tracker"
TRACKER_HOME = Path(os.environ.get("HOME_OFFICE_TRACKER_HOME", click.get_app_dir(APP_NAME)))
CONFIG_FILE = TRACKER_HOME / "home_office_tracker.conf"
DB_FILENAME = "home_office_tracker.db"


@dataclass
class Config:
    """Tracker configuration."""

    data_dir: str = ""
    log_level: str = "WARNING"


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    # Handle quoted values with inline comments: "value" # comment
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            if end_quote != -1:
                return value[1:end_quote]
            return value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from home_office_tracker.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_dir":
                config.data_dir = value
            case "log_level":
                config.log_level = value.upper()
            case _:
                logger.warning(f"Unknown config key in {path}: {key}")

    return config


def resolve_data_dir(override: Path | None, config: Config) -> Path:
    """Pick the data directory: --db flag, then DATA_DIR, then the app dir."""
    if override is not None:
        return Path(override).expanduser()
    if config.data_dir:
        return Path(config.data_dir).expanduser()
    return TRACKER_HOME


def db_path(data_dir: Path) -> Path:
    return data_dir / DB_FILENAME


def configure_logging(config: Config, debug: bool = False) -> None:
    """Set up root logging from --debug or LOG_LEVEL."""
    level = logging.DEBUG if debug else getattr(logging, config.log_level, None)
    valid = isinstance(level, int)
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level if valid else logging.WARNING,
    )
    if not valid:
        logger.warning(f"Invalid LOG_LEVEL {config.log_level!r}, using WARNING")
