"""Floating holidays defined as the Nth weekday of a month (US rules)."""

from datetime import date

from giftdates.dates.primitives import add_days, day_of_week, roll_forward_if_passed

# Python weekday numbers (Monday = 0)
THURSDAY = 3
SATURDAY = 5
SUNDAY = 6


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """Get the nth occurrence of *weekday* in a month.

    Args:
        year: Calendar year.
        month: Month 1-12.
        weekday: Target weekday, Monday = 0 ... Sunday = 6.
        n: 1-based occurrence index (1 = first).

    Returns:
        The matching date.
    """
    first_day = date(year, month, 1)
    days_until_weekday = (weekday - day_of_week(first_day)) % 7
    return add_days(first_day, days_until_weekday + 7 * (n - 1))


def thanksgiving(year: int, today: date | None = None) -> date:
    """4th Thursday of November, rolled forward if already passed."""
    return roll_forward_if_passed(
        lambda y: nth_weekday_of_month(y, 11, THURSDAY, 4), year, today
    )


def mothers_day(year: int, today: date | None = None) -> date:
    """2nd Sunday of May, rolled forward if already passed."""
    return roll_forward_if_passed(
        lambda y: nth_weekday_of_month(y, 5, SUNDAY, 2), year, today
    )


def fathers_day(year: int, today: date | None = None) -> date:
    """3rd Sunday of June, rolled forward if already passed."""
    return roll_forward_if_passed(
        lambda y: nth_weekday_of_month(y, 6, SUNDAY, 3), year, today
    )


def record_store_day(year: int, today: date | None = None) -> date:
    """3rd Saturday of April, rolled forward if already passed."""
    return roll_forward_if_passed(
        lambda y: nth_weekday_of_month(y, 4, SATURDAY, 3), year, today
    )
