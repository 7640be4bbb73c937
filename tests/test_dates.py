"""Tests for core date parsing and export logic."""

from datetime import date

import pytest

from home_office_tracker.core.dates import (
    DateParseError,
    collapse_ranges,
    expand_range,
    export_lines,
    format_range,
    parse_date,
    parse_dates,
)


@pytest.fixture
def today():
    return date(2025, 1, 15)


class TestParseDate:
    def test_iso(self):
        assert parse_date("2025-01-01") == date(2025, 1, 1)

    def test_dotted(self):
        assert parse_date("03.02.2025") == date(2025, 2, 3)

    def test_strips_whitespace(self):
        assert parse_date("  2025-01-01 ") == date(2025, 1, 1)

    @pytest.mark.parametrize("text", ["", "tomorrow", "2025/01/01", "2025-02-30", "32.01.2025"])
    def test_invalid(self, text):
        with pytest.raises(DateParseError):
            parse_date(text)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_date("nope")


class TestParseDates:
    def test_none_means_today(self, today):
        assert parse_dates(None, today=today) == [today]

    def test_blank_means_today(self, today):
        assert parse_dates("   ", today=today) == [today]

    def test_defaults_to_real_today(self):
        assert parse_dates(None) == [date.today()]

    def test_single_date(self):
        assert parse_dates("2025-01-01") == [date(2025, 1, 1)]

    def test_range(self):
        assert parse_dates("2025-01-01::2025-01-03") == [
            date(2025, 1, 1),
            date(2025, 1, 2),
            date(2025, 1, 3),
        ]

    def test_range_with_spaces_and_mixed_formats(self):
        assert parse_dates("30.12.2024 :: 2025-01-01") == [
            date(2024, 12, 30),
            date(2024, 12, 31),
            date(2025, 1, 1),
        ]

    def test_single_day_range(self):
        assert parse_dates("2025-01-01::2025-01-01") == [date(2025, 1, 1)]

    def test_reversed_range(self):
        with pytest.raises(DateParseError):
            parse_dates("2025-01-03::2025-01-01")

    def test_too_many_parts(self):
        with pytest.raises(DateParseError, match="Invalid date range"):
            parse_dates("2025-01-01::2025-01-02::2025-01-03")

    def test_empty_range_end(self):
        with pytest.raises(DateParseError):
            parse_dates("2025-01-01::")


class TestExpandRange:
    def test_crosses_month_and_leap_day(self):
        days = expand_range(date(2024, 2, 28), date(2024, 3, 1))
        assert days == [date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]


class TestCollapseRanges:
    def test_empty(self):
        assert collapse_ranges([]) == []

    def test_merges_consecutive_days(self):
        days = [date(2025, 1, 1), date(2025, 1, 2), date(2025, 1, 3), date(2025, 1, 5)]
        assert collapse_ranges(days) == [
            (date(2025, 1, 1), date(2025, 1, 3)),
            (date(2025, 1, 5), date(2025, 1, 5)),
        ]

    def test_unsorted_with_duplicates(self):
        days = [date(2025, 1, 2), date(2025, 1, 1), date(2025, 1, 2)]
        assert collapse_ranges(days) == [(date(2025, 1, 1), date(2025, 1, 2))]

    def test_year_boundary(self):
        days = [date(2024, 12, 31), date(2025, 1, 1)]
        assert collapse_ranges(days) == [(date(2024, 12, 31), date(2025, 1, 1))]


class TestExport:
    def test_format_single(self):
        assert format_range(date(2025, 1, 1), date(2025, 1, 1)) == "2025-01-01"

    def test_format_range(self):
        assert format_range(date(2025, 1, 1), date(2025, 1, 3)) == "2025-01-01 :: 2025-01-03"

    def test_export_lines(self):
        days = [date(2025, 1, 1), date(2025, 1, 2), date(2025, 1, 3), date(2025, 1, 7)]
        assert export_lines(days) == ["2025-01-01 :: 2025-01-03", "2025-01-07"]

    def test_export_line_parses_back(self):
        days = [date(2025, 1, 1), date(2025, 1, 2), date(2025, 1, 3)]
        (line,) = export_lines(days)
        assert parse_dates(line) == days
