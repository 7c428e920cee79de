"""Holidays whose Gregorian month/day never changes."""

from types import MappingProxyType

from giftdates.models.enums import OccasionType
from giftdates.models.occasion import MonthDay

FIXED_HOLIDAYS: MappingProxyType[str, MonthDay] = MappingProxyType({
    OccasionType.CHRISTMAS: MonthDay(month=12, day=25),
    OccasionType.CHRISTMAS_DAY: MonthDay(month=12, day=25),
    OccasionType.VALENTINES_DAY: MonthDay(month=2, day=14),
    OccasionType.NEW_YEARS_DAY: MonthDay(month=1, day=1),
    OccasionType.NEW_YEARS: MonthDay(month=1, day=1),
    OccasionType.INDEPENDENCE_DAY: MonthDay(month=7, day=4),
    OccasionType.HALLOWEEN: MonthDay(month=10, day=31),
    OccasionType.GROUNDHOG_DAY: MonthDay(month=2, day=2),
    OccasionType.ST_PATRICKS_DAY: MonthDay(month=3, day=17),
    OccasionType.CINCO_DE_MAYO: MonthDay(month=5, day=5),
    OccasionType.JUNETEENTH: MonthDay(month=6, day=19),
    OccasionType.VETERANS_DAY: MonthDay(month=11, day=11),
    # Kwanzaa runs Dec 26 - Jan 1; gifts go on the first day
    OccasionType.KWANZAA: MonthDay(month=12, day=26),
    OccasionType.KWANZA: MonthDay(month=12, day=26),
    OccasionType.MAKAR_SANKRANTI: MonthDay(month=1, day=14),
    OccasionType.VAISAKHI: MonthDay(month=4, day=14),
    OccasionType.BAISAKHI: MonthDay(month=4, day=14),
})


def lookup_fixed(normalized_type: str) -> MonthDay | None:
    """Return the month/day for a fixed holiday, or None if it is not one."""
    return FIXED_HOLIDAYS.get(normalized_type)
