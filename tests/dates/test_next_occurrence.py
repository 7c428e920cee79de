"""Tests for the next-occurrence calculator (birthdays, explicit dates)."""

from datetime import date

import pytest

from giftdates.dates.next_occurrence import (
    next_occurrence,
    next_occurrence_from_iso_date,
    next_occurrence_from_month_day,
)
from giftdates.errors import InvalidOccasionInputError
from giftdates.models.occasion import MonthDay

# Fixed reference date: Sunday, 2025-06-15
FIXED_TODAY = date(2025, 6, 15)


class TestFromMonthDay:
    def test_later_this_year(self):
        assert next_occurrence_from_month_day(12, 25, today=FIXED_TODAY) == "2025-12-25"

    def test_earlier_this_year_rolls_to_next(self):
        assert next_occurrence_from_month_day(6, 1, today=FIXED_TODAY) == "2026-06-01"

    def test_today_stays_current_year(self):
        assert next_occurrence_from_month_day(6, 15, today=FIXED_TODAY) == "2025-06-15"

    def test_reference_year_respected(self):
        result = next_occurrence_from_month_day(2, 30, reference_year=2025, today=date(2025, 1, 10))
        # Feb 30 rolls over like a native date: March 2nd
        assert result == "2025-03-02"

    def test_reference_year_in_past_still_not_before_today(self):
        result = next_occurrence_from_month_day(3, 1, reference_year=2020, today=FIXED_TODAY)
        assert result == "2026-03-01"

    def test_default_today(self):
        assert next_occurrence_from_month_day(1, 1) >= date.today().isoformat()


class TestFromIsoDate:
    def test_birth_year_discarded(self):
        assert next_occurrence_from_iso_date("1990-12-25", today=FIXED_TODAY) == "2025-12-25"

    def test_passed_date_rolls(self):
        assert next_occurrence_from_iso_date("1990-06-01", today=FIXED_TODAY) == "2026-06-01"

    def test_leap_day_birthday_in_common_year(self):
        assert next_occurrence_from_iso_date("2000-02-29", today=FIXED_TODAY) == "2026-03-01"

    def test_non_iso_passthrough(self):
        assert next_occurrence_from_iso_date("sometime in May", today=FIXED_TODAY) == "sometime in May"

    def test_slash_format_passthrough(self):
        assert next_occurrence_from_iso_date("2025/06/01", today=FIXED_TODAY) == "2025/06/01"

    def test_impossible_date_passthrough(self):
        assert next_occurrence_from_iso_date("2025-02-30", today=FIXED_TODAY) == "2025-02-30"


class TestNextOccurrence:
    def test_month_day_earlier_in_year(self):
        assert next_occurrence("06-01", today=FIXED_TODAY) == "2026-06-01"

    def test_month_day_later_in_year(self):
        assert next_occurrence("12-25", today=FIXED_TODAY) == "2025-12-25"

    def test_single_digit_month_day(self):
        assert next_occurrence("7-4", today=FIXED_TODAY) == "2025-07-04"

    def test_iso_date(self):
        assert next_occurrence("1985-07-04", today=FIXED_TODAY) == "2025-07-04"

    def test_month_day_model(self):
        assert next_occurrence(MonthDay(month=12, day=25), today=FIXED_TODAY) == "2025-12-25"

    def test_tuple(self):
        assert next_occurrence((1, 1), today=FIXED_TODAY) == "2026-01-01"

    def test_invalid_month_day_passthrough(self):
        assert next_occurrence("13-45", today=FIXED_TODAY) == "13-45"

    def test_empty_string_passthrough(self):
        assert next_occurrence("", today=FIXED_TODAY) == ""

    def test_wrong_type_raises(self):
        with pytest.raises(InvalidOccasionInputError):
            next_occurrence(20250615, today=FIXED_TODAY)  # type: ignore[arg-type]

    def test_wrong_type_is_type_error(self):
        with pytest.raises(TypeError):
            next_occurrence(None)  # type: ignore[arg-type]
