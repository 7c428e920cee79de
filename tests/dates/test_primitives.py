"""Tests for calendar primitives: rollover construction and roll-forward."""

from datetime import date, datetime
from zoneinfo import ZoneInfo

import pytest

from giftdates.config import reset_settings
from giftdates.dates.primitives import (
    add_days,
    day_of_week,
    is_before,
    make_date,
    roll_forward_if_passed,
    to_iso,
    today,
)


class TestMakeDate:
    def test_valid_date_unchanged(self):
        assert make_date(2025, 12, 25) == date(2025, 12, 25)

    def test_feb_30_rolls_into_march(self):
        assert make_date(2025, 2, 30) == date(2025, 3, 2)

    def test_feb_30_leap_year(self):
        assert make_date(2024, 2, 30) == date(2024, 3, 1)

    def test_feb_29_common_year_is_march_1(self):
        assert make_date(2025, 2, 29) == date(2025, 3, 1)

    def test_month_13_is_january_next_year(self):
        assert make_date(2025, 13, 1) == date(2026, 1, 1)

    def test_day_zero_is_last_day_of_previous_month(self):
        assert make_date(2025, 3, 0) == date(2025, 2, 28)


class TestAddDays:
    def test_crosses_year_boundary(self):
        assert add_days(date(2025, 12, 30), 3) == date(2026, 1, 2)

    def test_negative(self):
        assert add_days(date(2025, 3, 1), -1) == date(2025, 2, 28)


class TestDayOfWeek:
    def test_monday_is_zero(self):
        assert day_of_week(date(2025, 6, 16)) == 0

    def test_sunday_is_six(self):
        assert day_of_week(date(2025, 6, 15)) == 6


class TestIsBefore:
    def test_earlier_day(self):
        assert is_before(date(2025, 6, 14), date(2025, 6, 15))

    def test_same_day_is_not_before(self):
        assert not is_before(date(2025, 6, 15), date(2025, 6, 15))

    def test_later_day(self):
        assert not is_before(date(2025, 6, 16), date(2025, 6, 15))


class TestToIso:
    def test_zero_padded(self):
        assert to_iso(date(2025, 3, 4)) == "2025-03-04"


class TestRollForwardIfPassed:
    def test_future_date_kept(self):
        result = roll_forward_if_passed(lambda y: date(y, 12, 25), 2025, date(2025, 6, 15))
        assert result == date(2025, 12, 25)

    def test_past_date_moves_to_next_year(self):
        result = roll_forward_if_passed(lambda y: date(y, 1, 1), 2025, date(2025, 6, 15))
        assert result == date(2026, 1, 1)

    def test_today_is_not_passed(self):
        result = roll_forward_if_passed(lambda y: date(y, 6, 15), 2025, date(2025, 6, 15))
        assert result == date(2025, 6, 15)

    def test_old_start_year_rolls_until_current(self):
        result = roll_forward_if_passed(lambda y: date(y, 3, 1), 2020, date(2025, 6, 15))
        assert result == date(2026, 3, 1)

    def test_none_today_pins_year(self):
        result = roll_forward_if_passed(lambda y: date(y, 1, 1), 2020, None)
        assert result == date(2020, 1, 1)


class TestToday:
    def test_defaults_to_local_date(self):
        assert today() == date.today()

    def test_explicit_zone(self):
        tz = "Pacific/Kiritimati"
        assert today(tz) == datetime.now(ZoneInfo(tz)).date()

    def test_ignores_configured_zone(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TIMEZONE", "Mars/Olympus")
        reset_settings()
        assert today() == date.today()
