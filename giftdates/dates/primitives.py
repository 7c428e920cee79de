"""Calendar arithmetic shared by every occasion calculator."""

import logging
from collections.abc import Callable
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)


def today(tz: str | None = None) -> date:
    """Return the current local date (midnight-normalized "now").

    Read fresh on every call, never cache the result across calls.

    Args:
        tz: IANA zone name. When omitted the host's local clock is used.
    """
    if tz:
        return datetime.now(ZoneInfo(tz)).date()
    return date.today()


def make_date(year: int, month: int, day: int) -> date:
    """Build a date, letting out-of-range month/day values roll over.

    ``make_date(2025, 2, 30)`` is March 2nd and ``make_date(2025, 13, 1)``
    is January 1st 2026, the same normalization a native JS ``Date`` applies.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return add_days(date(year, month, 1), day - 1)


def add_days(d: date, days: int) -> date:
    return d + timedelta(days=days)


def day_of_week(d: date) -> int:
    """Weekday number, Monday = 0 ... Sunday = 6."""
    return d.weekday()


def is_before(a: date, b: date) -> bool:
    """True when *a* falls on an earlier day than *b*."""
    return a < b


def to_iso(d: date) -> str:
    return d.isoformat()


def roll_forward_if_passed(
    compute: Callable[[int], date],
    year: int,
    today: date | None,
) -> date:
    """Compute an annual date for *year*, moving to later years while it is past.

    Args:
        compute: Maps a year to that year's occurrence.
        year: First year to try.
        today: Reference "now", captured once by the caller. ``None`` pins
            the result to *year* (no roll-forward).

    Returns:
        The earliest occurrence that is on or after *today*.
    """
    result = compute(year)
    if today is None:
        return result
    while is_before(result, today):
        logger.debug("%s already passed (today %s), trying %d", result, today, year + 1)
        year += 1
        result = compute(year)
    return result
