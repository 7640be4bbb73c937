"""Home Office Tracker CLI."""

import json
import sys
from datetime import date
from pathlib import Path

import click

from .adapters.sqlite_store import SqliteDayStore, StoreError
from .config import configure_logging, load_config, resolve_data_dir
from .core.dates import DateParseError, collapse_ranges, parse_dates
from .menu import run_menu
from .tracker import (
    add_days,
    echo_added,
    echo_export,
    echo_list,
    echo_removed,
    export_days,
    list_days,
    open_store,
    remove_days,
)


def _store(ctx: click.Context) -> SqliteDayStore:
    """Open the day store for the current command; closed when the command ends."""
    data_dir = ctx.obj
    try:
        return ctx.with_resource(open_store(data_dir))
    except (OSError, StoreError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _parse(words: tuple[str, ...]) -> list[date]:
    """Join the DATE words and parse them; no words means today."""
    try:
        return parse_dates(" ".join(words) if words else None)
    except DateParseError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.option(
    "--db",
    "-d",
    "data_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Data directory holding home_office_tracker.db",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option()
@click.pass_context
def main(ctx, data_dir: Path | None, debug: bool):
    """Home Office Tracker - record the days you worked from home."""
    config = load_config()
    configure_logging(config, debug)
    ctx.obj = resolve_data_dir(data_dir, config)

    if ctx.invoked_subcommand is None:
        ctx.invoke(tui)


@main.command()
@click.pass_context
def tui(ctx):
    """Full-screen view (default)."""
    from .tui import run_tui

    store = _store(ctx)
    try:
        run_tui(store)
    except (StoreError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command("cli")
@click.pass_context
def cli_menu(ctx):
    """Interactive one-keystroke menu."""
    store = _store(ctx)
    try:
        run_menu(store)
    except StoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except (KeyboardInterrupt, EOFError, click.Abort):
        click.echo()


@main.command()
@click.argument("words", nargs=-1, metavar="[DATE]")
@click.pass_context
def add(ctx, words: tuple[str, ...]):
    """Add a day, a START::END range, or today."""
    days = _parse(words)
    store = _store(ctx)
    try:
        echo_added(add_days(store, days))
    except StoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.argument("words", nargs=-1, metavar="[DATE]")
@click.pass_context
def remove(ctx, words: tuple[str, ...]):
    """Remove a day, a START::END range, or today."""
    days = _parse(words)
    store = _store(ctx)
    try:
        echo_removed(remove_days(store, days))
    except StoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_cmd(ctx, as_json: bool):
    """List all home office days."""
    store = _store(ctx)
    try:
        days = list_days(store)
    except StoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([d.isoformat() for d in days], indent=2))
    else:
        echo_list(days)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def export(ctx, as_json: bool):
    """Export days with consecutive days merged into ranges."""
    store = _store(ctx)
    try:
        if as_json:
            ranges = collapse_ranges(list_days(store))
            click.echo(
                json.dumps(
                    [{"start": start.isoformat(), "end": end.isoformat()} for start, end in ranges],
                    indent=2,
                )
            )
        else:
            echo_export(export_days(store))
    except StoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command("data-dir")
@click.pass_context
def data_dir_cmd(ctx):
    """Print the data directory."""
    data_dir = ctx.obj
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(str(data_dir))


if __name__ == "__main__":
    main()
