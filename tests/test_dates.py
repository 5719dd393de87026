"""Tests for wellnest.data.dates."""

from datetime import date, datetime
from unittest.mock import patch
from zoneinfo import ZoneInfo

import pytest

from wellnest.core.config import Settings
from wellnest.data.dates import day_of_year, display_label, heading_label, local_today, parse_day


class TestParseDay:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2026-03-01", date(2026, 3, 1)),
            ("2026-03-01T22:15:00+05:00", date(2026, 3, 1)),
            ("Sun Mar 01 2026", date(2026, 3, 1)),
            (date(2026, 3, 1), date(2026, 3, 1)),
            (datetime(2026, 3, 1, 23, 59), date(2026, 3, 1)),
        ],
    )
    def test_accepted_forms(self, value: object, expected: date) -> None:
        assert parse_day(value) == expected

    @pytest.mark.parametrize("value", ["", "tomorrow", "2026-13-01", None, 20260301, []])
    def test_rejected_forms(self, value: object) -> None:
        assert parse_day(value) is None


class TestDayOfYear:
    def test_first_day(self) -> None:
        assert day_of_year(date(2026, 1, 1)) == 1

    def test_last_day_leap_year(self) -> None:
        assert day_of_year(date(2028, 12, 31)) == 366

    def test_march_first(self) -> None:
        assert day_of_year(date(2026, 3, 1)) == 60


def test_labels() -> None:
    assert display_label(date(2026, 10, 5)) == "Oct 5"
    assert heading_label(date(2026, 3, 1)) == "Sunday, March 1, 2026"


def test_local_today_uses_configured_timezone() -> None:
    fixed = datetime(2026, 3, 1, 23, 30, tzinfo=ZoneInfo("UTC"))

    class _FakeDatetime(datetime):
        @classmethod
        def now(cls, tz=None):  # type: ignore[override]
            return fixed.astimezone(tz)

    with patch("wellnest.data.dates.datetime", _FakeDatetime):
        assert local_today(Settings(timezone="UTC")) == date(2026, 3, 1)
        assert local_today(Settings(timezone="Asia/Tokyo")) == date(2026, 3, 2)
