"""Next-occurrence calculator for recurring annual dates (birthdays, explicit dates)."""

import re
from datetime import date

from giftdates.dates import primitives
from giftdates.errors import InvalidOccasionInputError
from giftdates.models.occasion import MonthDay

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_MONTH_DAY = re.compile(r"(\d{1,2})-(\d{1,2})", re.ASCII)

# Leap year used to validate bare month/day strings so "02-29" is accepted
_LEAP_YEAR = 2000


def next_occurrence_from_month_day(
    month: int,
    day: int,
    reference_year: int | None = None,
    today: date | None = None,
) -> str:
    """Return the first occurrence of month/day that is today or later.

    Out-of-range days roll over rather than raise (Feb 30 -> early March),
    so a Feb 29 birthday lands on March 1st in common years.

    Args:
        month: Month 1-12.
        day: Day of month.
        reference_year: Year to start from. Defaults to the current year.
        today: Override for today's date (for testing).

    Returns:
        Date string in YYYY-MM-DD format.
    """
    today = today or primitives.today()
    year = reference_year if reference_year is not None else today.year
    result = primitives.roll_forward_if_passed(
        lambda y: primitives.make_date(y, month, day), year, today
    )
    return primitives.to_iso(result)


def next_occurrence_from_iso_date(iso_date: str, today: date | None = None) -> str:
    """Move an ISO date to its next yearly occurrence, discarding its year.

    Strings that are not ``YYYY-MM-DD`` or that name an impossible date are
    returned unchanged (callers may pass placeholders).
    """
    if not _ISO_DATE.fullmatch(iso_date):
        return iso_date
    try:
        parsed = date.fromisoformat(iso_date)
    except ValueError:
        return iso_date
    return next_occurrence_from_month_day(parsed.month, parsed.day, today=today)


def _parse_month_day(text: str) -> tuple[int, int] | None:
    match = _MONTH_DAY.fullmatch(text)
    if not match:
        return None
    month, day = int(match.group(1)), int(match.group(2))
    try:
        date(_LEAP_YEAR, month, day)
    except ValueError:
        return None
    return month, day


def next_occurrence(
    value: str | MonthDay | tuple[int, int],
    today: date | None = None,
) -> str:
    """Return the next occurrence of a birthday or explicit date.

    Accepts:
    - ISO date: "1990-03-14" (year is ignored)
    - Month/day string: "03-14"
    - ``MonthDay`` or a ``(month, day)`` tuple

    Unparseable strings are returned unchanged.

    Raises:
        InvalidOccasionInputError: If *value* is none of the accepted types.
    """
    if isinstance(value, MonthDay):
        return next_occurrence_from_month_day(value.month, value.day, today=today)
    if isinstance(value, tuple) and len(value) == 2:
        month, day = value
        return next_occurrence_from_month_day(month, day, today=today)
    if not isinstance(value, str):
        raise InvalidOccasionInputError(
            f"value must be a str, MonthDay or (month, day) tuple, got {type(value).__name__}"
        )

    if _ISO_DATE.fullmatch(value):
        return next_occurrence_from_iso_date(value, today=today)
    month_day = _parse_month_day(value)
    if month_day is None:
        return value
    return next_occurrence_from_month_day(*month_day, today=today)
