"""Tests for display formatting helpers."""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from bblstats.utilities.formatters import (
    format_date,
    format_datetime,
    format_height,
    format_number,
    format_percentage,
    format_record,
    format_streak,
    format_time,
    format_weight,
    format_win_percentage,
    format_with_commas,
    relative_time,
)

TZ = "Europe/Zagreb"


class TestNumbers:
    @pytest.mark.parametrize(
        "value,decimals,expected",
        [("12.345", 1, "12.3"), (5, 0, "5"), (None, 1, "-"), ("", 1, "-"), ("abc", 1, "-")],
    )
    def test_format_number(self, value, decimals, expected):
        assert format_number(value, decimals) == expected

    def test_format_percentage(self):
        assert format_percentage(0.75) == "75.0%"
        assert format_percentage(None) == "-"

    def test_win_percentage_display_vs_compute(self):
        assert format_win_percentage(0, 0) == ".000"
        assert format_win_percentage(3, 1) == "0.750"

    def test_commas(self):
        assert format_with_commas(1000) == "1,000"
        assert format_with_commas(1234567) == "1,234,567"

    def test_record_and_streak(self):
        assert format_record(10, 2) == "10-2"
        assert format_streak("W4") == "W4"
        assert format_streak("") == "-"
        assert format_streak(None) == "-"


class TestMetrics:
    def test_height(self):
        assert format_height("201") == "6'7\""
        assert format_height(None) == "-"

    def test_weight(self):
        assert format_weight(100) == "220 lbs"
        assert format_weight("") == "-"


class TestDates:
    def test_format_date(self):
        assert format_date("2025-10-19T20:00:00", TZ) == "Oct 19, 2025"

    def test_format_datetime_naive_is_local(self):
        assert format_datetime("2025-10-19T20:00:00", TZ) == "Oct 19, 2025, 8:00 PM"

    def test_format_datetime_converts_aware(self):
        assert format_datetime("2025-10-19T18:00:00Z", TZ) == "Oct 19, 2025, 8:00 PM"

    def test_unparseable_returned_unchanged(self):
        assert format_date("xyz", TZ) == "xyz"
        assert format_datetime("xyz", TZ) == "xyz"

    @pytest.mark.parametrize(
        "value,expected",
        [("20:05", "8:05 PM"), ("00:30", "12:30 AM"), ("12:00", "12:00 PM"), ("bad", "bad")],
    )
    def test_format_time(self, value, expected):
        assert format_time(value) == expected


class TestRelativeTime:
    now = datetime(2025, 10, 19, 18, 0, tzinfo=ZoneInfo(TZ))

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2025-10-19T18:00:20", "just now"),
            ("2025-10-19T18:05:00", "in 5 min"),
            ("2025-10-19T17:30:00", "30 min ago"),
            ("2025-10-19T21:00:00", "in 3h"),
            ("2025-10-17T18:00:00", "2d ago"),
            ("2025-10-01T18:00:00", "Oct 1, 2025"),
        ],
    )
    def test_buckets(self, value, expected):
        assert relative_time(value, now=self.now, tz_name=TZ) == expected

    def test_unparseable(self):
        assert relative_time("xyz", now=self.now, tz_name=TZ) == "xyz"
