"""Functional core - pure business logic with no I/O."""

from .dates import (
    DateParseError,
    collapse_ranges,
    expand_range,
    export_lines,
    format_range,
    parse_date,
    parse_dates,
)

__all__ = [
    "DateParseError",
    "collapse_ranges",
    "expand_range",
    "export_lines",
    "format_range",
    "parse_date",
    "parse_dates",
]
