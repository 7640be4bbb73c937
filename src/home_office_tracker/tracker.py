"""Shared workflow layer between the command line, the menu and the TUI.

The workflow functions take an open DayStore and return plain data; the
echo_* helpers print that data in the shared output format.
"""

import logging
from datetime import date
from pathlib import Path

import click

from .adapters.sqlite_store import SqliteDayStore
from .config import db_path
from .core.dates import export_lines
from .ports.day_store import DayStore

logger = logging.getLogger(__name__)


def today() -> date:
    """Local calendar date."""
    return date.today()


def open_store(data_dir: Path) -> SqliteDayStore:
    """Create the data directory if needed and open the day database in it."""
    data_dir.mkdir(parents=True, exist_ok=True)
    return SqliteDayStore(db_path(data_dir))


def add_days(store: DayStore, days: list[date]) -> list[date]:
    """Store every day. Days already present are left as they are."""
    for day in days:
        if store.add(day):
            logger.info(f"Added {day.isoformat()}")
        else:
            logger.debug(f"{day.isoformat()} already recorded")
    return days


def remove_days(store: DayStore, days: list[date]) -> list[date]:
    """Delete every day. Days not present are ignored."""
    for day in days:
        if store.remove(day):
            logger.info(f"Removed {day.isoformat()}")
        else:
            logger.debug(f"{day.isoformat()} was not recorded")
    return days


def list_days(store: DayStore) -> list[date]:
    return store.all()


def export_days(store: DayStore) -> list[str]:
    """Stored days as export lines (consecutive days merged into ranges)."""
    return export_lines(store.all())


def echo_added(days: list[date]) -> None:
    for day in days:
        click.echo(f"Date added successfully: {day.isoformat()}")


def echo_removed(days: list[date]) -> None:
    for _ in days:
        click.echo("Date deleted successfully.")


def echo_list(days: list[date]) -> None:
    click.echo("Home Office Days:")
    for day in days:
        click.echo(day.isoformat())


def echo_export(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)
