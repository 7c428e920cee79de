"""Resolve an occasion label to its next concrete calendar date."""

import logging
import re
from collections.abc import Callable
from datetime import date

from giftdates.dates import astronomical, floating, lunar, primitives
from giftdates.dates.fixed import lookup_fixed
from giftdates.dates.next_occurrence import next_occurrence_from_month_day
from giftdates.errors import require_str
from giftdates.models.enums import OccasionType, SolarEvent

logger = logging.getLogger(__name__)

_APOSTROPHES = re.compile(r"['’]")
_WHITESPACE = re.compile(r"\s+")

# Calculator signature: (year, today-or-None) -> date
Calculator = Callable[[int, date | None], date]


def _solar(which: SolarEvent) -> Calculator:
    return lambda year, today: astronomical.equinox_or_solstice(year, which, today)


_VARIABLE_HOLIDAYS: dict[OccasionType, Calculator] = {
    OccasionType.EASTER: astronomical.easter,
    OccasionType.THANKSGIVING: floating.thanksgiving,
    OccasionType.MOTHERS_DAY: floating.mothers_day,
    OccasionType.MOTHERSDAY: floating.mothers_day,
    OccasionType.FATHERS_DAY: floating.fathers_day,
    OccasionType.FATHERSDAY: floating.fathers_day,
    OccasionType.RECORD_STORE_DAY: floating.record_store_day,
    OccasionType.SPRING_EQUINOX: _solar(SolarEvent.MARCH_EQUINOX),
    OccasionType.VERNAL_EQUINOX: _solar(SolarEvent.MARCH_EQUINOX),
    OccasionType.SUMMER_SOLSTICE: _solar(SolarEvent.JUNE_SOLSTICE),
    OccasionType.AUTUMN_EQUINOX: _solar(SolarEvent.SEPTEMBER_EQUINOX),
    OccasionType.FALL_EQUINOX: _solar(SolarEvent.SEPTEMBER_EQUINOX),
    OccasionType.WINTER_SOLSTICE: _solar(SolarEvent.DECEMBER_SOLSTICE),
    OccasionType.DIWALI: lunar.diwali,
    OccasionType.HOLI: lunar.holi,
    OccasionType.HANUKKAH: lunar.hanukkah,
    OccasionType.CHANUKAH: lunar.hanukkah,
    OccasionType.ROSH_HASHANAH: lunar.rosh_hashanah,
    OccasionType.ROSH_HASHANA: lunar.rosh_hashanah,
    OccasionType.YOM_KIPPUR: lunar.yom_kippur,
    OccasionType.PASSOVER: lunar.passover,
    OccasionType.PESACH: lunar.passover,
    OccasionType.SUKKOT: lunar.sukkot,
    OccasionType.SUKKOS: lunar.sukkot,
}


def normalize_occasion_type(occasion_type: str) -> str:
    """Normalize a free-text label: "Valentine's Day" -> "valentines_day"."""
    cleaned = _APOSTROPHES.sub("", occasion_type.strip().lower())
    return _WHITESPACE.sub("_", cleaned)


def parse_occasion_type(occasion_type: str) -> OccasionType | None:
    """Map a label to a known ``OccasionType``, or None for anything else."""
    try:
        return OccasionType(normalize_occasion_type(occasion_type))
    except ValueError:
        return None


def has_deterministic_date(occasion_type: str) -> bool:
    kind = parse_occasion_type(occasion_type)
    return kind is not None and (lookup_fixed(kind) is not None or kind in _VARIABLE_HOLIDAYS)


def supported_occasion_types() -> list[str]:
    """All labels the resolver can turn into a date, sorted."""
    return sorted(kind.value for kind in OccasionType if has_deterministic_date(kind))


def resolve_occasion_date(
    occasion_type: str,
    year: int | None = None,
    today: date | None = None,
) -> str | None:
    """Look up the date for an occasion type.

    Handles fixed-date holidays (Christmas), floating holidays (Thanksgiving),
    Easter, equinoxes/solstices and lunar festivals (Diwali, Hanukkah).

    Args:
        occasion_type: Free-text label, e.g. "Valentine's Day" or "easter".
        year: Pin the result to this year. When omitted, the current year is
            used and the date moves to next year if it has already passed.
        today: Override for today's date (for testing). Read once per call.

    Returns:
        ISO date string (YYYY-MM-DD), or None when the occasion is
        user-specific or unrecognized and the user must supply a date.

    Raises:
        InvalidOccasionInputError: If *occasion_type* is not a string.
    """
    require_str(occasion_type, "occasion_type")
    today = today or primitives.today()
    # An explicit year is taken literally: no roll-forward
    reference = None if year is not None else today
    target_year = year if year is not None else today.year

    kind = parse_occasion_type(occasion_type)
    if kind is None:
        logger.debug("No deterministic date for occasion %r", occasion_type)
        return None

    fixed = lookup_fixed(kind)
    if fixed is not None:
        if year is not None:
            return primitives.to_iso(primitives.make_date(year, fixed.month, fixed.day))
        return next_occurrence_from_month_day(fixed.month, fixed.day, today=today)

    calculator = _VARIABLE_HOLIDAYS.get(kind)
    if calculator is None:
        logger.debug("Occasion %r needs a user-supplied date", kind.value)
        return None
    return primitives.to_iso(calculator(target_year, reference))
