"""Lunar and lunisolar festivals: lookup tables with a drift-based fallback.

Hindu and Hebrew festival dates depend on the moon, so they are tabulated
for a window of years. Outside the window the date is extrapolated from the
nearest tabulated year: the lunar year is ~11 days shorter than the solar
year, and every time the estimate leaves the festival's usual season an
intercalary month (30 days) puts it back. This is a rough approximation;
extend the tables rather than rely on it.

Jewish festivals are listed by the evening they begin (erev).
"""

import logging
from datetime import date

from giftdates.dates.primitives import add_days, is_before, roll_forward_if_passed
from giftdates.models.occasion import MonthDay

logger = logging.getLogger(__name__)

# Solar year minus lunar year (365.24 - 354.37), rounded
_DRIFT_DAYS_PER_YEAR = 11
_INTERCALARY_MONTH_DAYS = 30


class LunarFestival:
    """A festival with tabulated dates and an extrapolated fallback.

    Args:
        name: Display name, used in log messages.
        dates: Known dates keyed by Gregorian year.
        season_start: Earliest plausible month/day; the festival falls in the
            30 days starting here. Used to keep extrapolations in season.
        derived_from: Compute untabulated years from another festival
            instead of extrapolating (e.g. Yom Kippur from Rosh Hashanah).
        offset_days: Days after *derived_from*.
    """

    def __init__(
        self,
        name: str,
        dates: dict[int, str],
        season_start: MonthDay,
        derived_from: "LunarFestival | None" = None,
        offset_days: int = 0,
    ) -> None:
        self.name = name
        self.dates = {year: date.fromisoformat(iso) for year, iso in dates.items()}
        self.season_start = season_start
        self.derived_from = derived_from
        self.offset_days = offset_days

    @property
    def first_year(self) -> int:
        return min(self.dates)

    @property
    def last_year(self) -> int:
        return max(self.dates)

    def on(self, year: int) -> date:
        """Return the festival's date in *year* (tabulated or approximated)."""
        if year in self.dates:
            return self.dates[year]
        if self.derived_from is not None:
            return add_days(self.derived_from.on(year), self.offset_days)
        return self.extrapolate(year)

    def extrapolate(self, year: int) -> date:
        """Approximate the date for a year outside the table."""
        anchor_year = self.last_year if year > self.last_year else self.first_year
        anchor = self.dates[anchor_year]
        estimate = add_days(
            date(year, anchor.month, anchor.day), -_DRIFT_DAYS_PER_YEAR * (year - anchor_year)
        )

        window_start = date(year, self.season_start.month, self.season_start.day)
        window_end = add_days(window_start, _INTERCALARY_MONTH_DAYS)
        while is_before(estimate, window_start):
            estimate = add_days(estimate, _INTERCALARY_MONTH_DAYS)
        while not is_before(estimate, window_end):
            estimate = add_days(estimate, -_INTERCALARY_MONTH_DAYS)

        logger.debug(
            "%s %d not tabulated; extrapolated %s from %d", self.name, year, estimate, anchor_year
        )
        return estimate

    def next_on_or_after(self, year: int, today: date | None = None) -> date:
        """Date for *year*, rolled forward if it has already passed."""
        return roll_forward_if_passed(self.on, year, today)


DIWALI = LunarFestival(
    "Diwali",
    {
        2024: "2024-11-01",
        2025: "2025-10-20",
        2026: "2026-11-08",
        2027: "2027-10-28",
        2028: "2028-10-17",
        2029: "2029-11-05",
        2030: "2030-10-26",
    },
    season_start=MonthDay(month=10, day=17),
)

HOLI = LunarFestival(
    "Holi",
    {
        2024: "2024-03-25",
        2025: "2025-03-14",
        2026: "2026-03-03",
        2027: "2027-03-22",
        2028: "2028-03-11",
        2029: "2029-03-01",
        2030: "2030-03-20",
    },
    season_start=MonthDay(month=2, day=26),
)

HANUKKAH = LunarFestival(
    "Hanukkah",
    {
        2024: "2024-12-25",
        2025: "2025-12-14",
        2026: "2026-12-04",
        2027: "2027-12-24",
        2028: "2028-12-12",
        2029: "2029-12-01",
        2030: "2030-12-20",
    },
    season_start=MonthDay(month=11, day=27),
)

ROSH_HASHANAH = LunarFestival(
    "Rosh Hashanah",
    {
        2024: "2024-10-02",
        2025: "2025-09-22",
        2026: "2026-09-11",
        2027: "2027-10-01",
        2028: "2028-09-20",
        2029: "2029-09-09",
        2030: "2030-09-27",
    },
    season_start=MonthDay(month=9, day=5),
)

# 10 Tishrei
YOM_KIPPUR = LunarFestival(
    "Yom Kippur",
    {
        2024: "2024-10-11",
        2025: "2025-10-01",
        2026: "2026-09-20",
        2027: "2027-10-10",
        2028: "2028-09-29",
        2029: "2029-09-18",
        2030: "2030-10-06",
    },
    season_start=MonthDay(month=9, day=14),
    derived_from=ROSH_HASHANAH,
    offset_days=9,
)

# 15 Tishrei
SUKKOT = LunarFestival(
    "Sukkot",
    {
        2024: "2024-10-16",
        2025: "2025-10-06",
        2026: "2026-09-25",
        2027: "2027-10-15",
        2028: "2028-10-04",
        2029: "2029-09-23",
        2030: "2030-10-11",
    },
    season_start=MonthDay(month=9, day=19),
    derived_from=ROSH_HASHANAH,
    offset_days=14,
)

PASSOVER = LunarFestival(
    "Passover",
    {
        2024: "2024-04-22",
        2025: "2025-04-12",
        2026: "2026-04-01",
        2027: "2027-04-21",
        2028: "2028-04-10",
        2029: "2029-03-30",
        2030: "2030-04-17",
    },
    season_start=MonthDay(month=3, day=26),
)


def diwali(year: int, today: date | None = None) -> date:
    return DIWALI.next_on_or_after(year, today)


def holi(year: int, today: date | None = None) -> date:
    return HOLI.next_on_or_after(year, today)


def hanukkah(year: int, today: date | None = None) -> date:
    return HANUKKAH.next_on_or_after(year, today)


def rosh_hashanah(year: int, today: date | None = None) -> date:
    return ROSH_HASHANAH.next_on_or_after(year, today)


def yom_kippur(year: int, today: date | None = None) -> date:
    return YOM_KIPPUR.next_on_or_after(year, today)


def sukkot(year: int, today: date | None = None) -> date:
    return SUKKOT.next_on_or_after(year, today)


def passover(year: int, today: date | None = None) -> date:
    return PASSOVER.next_on_or_after(year, today)
