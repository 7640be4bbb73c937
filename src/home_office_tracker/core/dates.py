"""Pure date parsing and export logic - no I/O dependencies."""

from datetime import date, datetime, timedelta
from typing import Iterable

DATE_FORMATS = ("%Y-%m-%d", "%d.%m.%Y")
RANGE_SEPARATOR = "::"
ISO_FORMAT = "%Y-%m-%d"


class DateParseError(ValueError):
    """Raised when user input cannot be read as a date or date range."""


def parse_date(text: str) -> date:
    """Parse a single date in YYYY-MM-DD or DD.MM.YYYY form."""
    value = text.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise DateParseError(f"Invalid date: {value!r} (expected YYYY-MM-DD or DD.MM.YYYY)")


def expand_range(start: date, end: date) -> list[date]:
    """
    Every date from start to end, both inclusive.

    Pure function - no I/O.
    """
    if end < start:
        raise DateParseError(f"Invalid date range: {start.isoformat()} is after {end.isoformat()}")
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def parse_dates(text: str | None, today: date | None = None) -> list[date]:
    """
    Parse a date or a `start::end` range into a list of dates.

    Args:
        text: User input. None or blank means today.
        today: Date used when no input is given (defaults to date.today())

    Returns:
        The single date, or every date of the range in order
    """
    if text is None or not text.strip():
        return [today or date.today()]

    parts = [parse_date(part) for part in text.split(RANGE_SEPARATOR)]

    if len(parts) == 1:
        return parts
    if len(parts) == 2:
        return expand_range(parts[0], parts[1])
    raise DateParseError("Invalid date range")


def collapse_ranges(days: Iterable[date]) -> list[tuple[date, date]]:
    """
    Merge consecutive days into (start, end) runs.

    Input may be unsorted and contain duplicates.
    """
    ordered = sorted(set(days))
    if not ordered:
        return []

    ranges = []
    start = end = ordered[0]
    for day in ordered[1:]:
        if day == end + timedelta(days=1):
            end = day
        else:
            ranges.append((start, end))
            start = end = day
    ranges.append((start, end))
    return ranges


def format_range(start: date, end: date) -> str:
    """Format a run as `YYYY-MM-DD` or `YYYY-MM-DD :: YYYY-MM-DD`."""
    if start == end:
        return start.strftime(ISO_FORMAT)
    return f"{start.strftime(ISO_FORMAT)} {RANGE_SEPARATOR} {end.strftime(ISO_FORMAT)}"


def export_lines(days: Iterable[date]) -> list[str]:
    """Export format: one line per run of consecutive days."""
    return [format_range(start, end) for start, end in collapse_ranges(days)]
