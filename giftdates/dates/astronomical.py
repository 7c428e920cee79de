"""Equinox/solstice approximations and the Gregorian Easter algorithm."""

from datetime import UTC, date, datetime, timedelta

from giftdates.dates.primitives import roll_forward_if_passed
from giftdates.models.enums import SolarEvent

# Julian Day of the Unix epoch (1970-01-01T00:00Z)
_UNIX_EPOCH_JD = 2440587.5
_MS_PER_DAY = 86_400_000
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

# Meeus, Astronomical Algorithms, table 27.B: mean JDE polynomials in
# Y = (year - 2000) / 1000. Good to within about a day for 1951-2050.
_JDE_COEFFICIENTS: dict[SolarEvent, tuple[float, float, float, float, float]] = {
    SolarEvent.MARCH_EQUINOX: (2451623.80984, 365242.37404, 0.05169, -0.00411, -0.00057),
    SolarEvent.JUNE_SOLSTICE: (2451716.56767, 365241.62603, 0.00325, 0.00888, -0.00030),
    SolarEvent.SEPTEMBER_EQUINOX: (2451810.21715, 365242.01767, -0.11575, 0.00337, 0.00078),
    SolarEvent.DECEMBER_SOLSTICE: (2451900.05952, 365242.74049, -0.06223, -0.00823, 0.00032),
}


def solar_event_jde(year: int, which: SolarEvent) -> float:
    """Return the approximate Julian Ephemeris Day of an equinox or solstice."""
    y = (year - 2000) / 1000
    c0, c1, c2, c3, c4 = _JDE_COEFFICIENTS[which]
    return c0 + c1 * y + c2 * y**2 + c3 * y**3 + c4 * y**4


def jde_to_date(jde: float) -> date:
    """Convert a Julian Day to the UTC calendar date it falls on."""
    ms = (jde - _UNIX_EPOCH_JD) * _MS_PER_DAY
    return (_UNIX_EPOCH + timedelta(milliseconds=ms)).date()


def equinox_or_solstice(
    year: int,
    which: SolarEvent,
    today: date | None = None,
) -> date:
    """Date of an equinox or solstice, rolled forward if already passed.

    Args:
        year: Year to compute.
        which: The solar event.
        today: Reference date for roll-forward. ``None`` returns *year*'s date.
    """
    return roll_forward_if_passed(
        lambda y: jde_to_date(solar_event_jde(y, which)), year, today
    )


def easter_sunday(year: int) -> date:
    """Calculate Easter Sunday using the Anonymous Gregorian algorithm.

    Also known as the Meeus/Jones/Butcher algorithm. Only checked for
    1900-2099; other years are not rejected.

    Args:
        year: The year to calculate Easter for.

    Returns:
        Date of Easter Sunday.
    """
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


def easter(year: int, today: date | None = None) -> date:
    """Easter Sunday, rolled forward if already passed."""
    return roll_forward_if_passed(easter_sunday, year, today)
