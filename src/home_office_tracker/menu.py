"""One-keystroke interactive menu."""

from datetime import date

import click

from . import tracker
from .core.dates import DateParseError, parse_date
from .ports.day_store import DayStore

MENU = """Home Office Tracker
1. Add (t)oday's home office day (default)
2. (A)dd a specific home office day
3. (L)ist all home office days
4. (D)elete a home office day
5. (E)xport all home office days"""

INVALID_FORMAT = "Invalid date format. Please use YYYY-MM-DD."


def _add_specific(store: DayStore, today: date) -> None:
    raw = click.prompt(
        "Enter a date (YYYY-MM-DD) or press Enter to use today",
        default=today.isoformat(),
        show_default=True,
    )
    try:
        day = parse_date(raw)
    except DateParseError:
        click.echo(INVALID_FORMAT)
        return
    tracker.echo_added(tracker.add_days(store, [day]))


def _delete(store: DayStore) -> None:
    # Blank input falls through to the invalid-format message instead of re-prompting
    raw = click.prompt("Enter a date to delete (YYYY-MM-DD)", default="", show_default=False)
    try:
        day = parse_date(raw)
    except DateParseError:
        click.echo(INVALID_FORMAT)
        return
    tracker.echo_removed(tracker.remove_days(store, [day]))


def run_menu(store: DayStore, today: date | None = None) -> None:
    """Show the menu, read a single key and run the chosen action."""
    today = today or tracker.today()

    click.echo(MENU)
    click.echo("Choose an option (default is 1): ", nl=False)
    choice = click.getchar().lower()
    click.echo()

    match choice:
        case "\r" | "\n" | "1" | "t":
            tracker.echo_added(tracker.add_days(store, [today]))
        case "2" | "a":
            _add_specific(store, today)
        case "3" | "l":
            tracker.echo_list(tracker.list_days(store))
        case "4" | "d":
            _delete(store)
        case "5" | "e":
            tracker.echo_export(tracker.export_days(store))
        case _:
            click.echo("Invalid option.")
