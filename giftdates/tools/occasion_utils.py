"""Helpers that apply the date engine to occasion records."""

import logging
from datetime import date

from giftdates.dates import primitives
from giftdates.dates.resolver import normalize_occasion_type, resolve_occasion_date
from giftdates.models.enums import OccasionType
from giftdates.models.occasion import (
    Occasion,
    OccasionRecommendation,
    OccasionRecommendations,
)

logger = logging.getLogger(__name__)

_DATE_TBD = "Date TBD"
_FALLBACK_SUGGESTIONS = ["Christmas", "New Year", "Thanksgiving"]


def parse_iso_date(value: str | None) -> date | None:
    """Read the YYYY-MM-DD prefix of *value*; None if it is not a real date."""
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10]) if len(value) >= 10 else None
    except ValueError:
        return None


def convert_holidays_to_occasions(
    holiday_names: list[str],
    today: date | None = None,
) -> list[Occasion]:
    """Turn holiday names mentioned in conversation into dated occasions.

    Unrecognized names are skipped; the caller asks the user for those.
    """
    today = today or primitives.today()
    occasions: list[Occasion] = []
    for name in holiday_names:
        resolved = resolve_occasion_date(name, today=today)
        if resolved is None:
            logger.debug("Skipping holiday without a known date: %r", name)
            continue
        occasions.append(
            Occasion(occasion_type=normalize_occasion_type(name), date=resolved)
        )
    return occasions


def get_next_occasion(
    occasions: list[Occasion] | None,
    today: date | None = None,
) -> Occasion | None:
    """Return the next upcoming occasion.

    Occasions without a usable date are ignored. If every dated occasion is
    in the past, the earliest one is returned.
    """
    if not occasions:
        return None
    today = today or primitives.today()

    dated = [(d, occ) for occ in occasions if (d := parse_iso_date(occ.date)) is not None]
    if not dated:
        return None
    dated.sort(key=lambda pair: pair[0])

    for d, occ in dated:
        if d >= today:
            return occ
    return dated[0][1]


def format_occasion_type(occasion_type: str, custom_occasion: str | None = None) -> str:
    """Human-readable label, e.g. "valentines_day" -> "Valentines day"."""
    if occasion_type == OccasionType.BIRTHDAY:
        return "Birthday"
    if occasion_type == OccasionType.CUSTOM and custom_occasion:
        return custom_occasion
    formatted = occasion_type[:1].upper() + occasion_type[1:]
    return formatted.replace("_", " ")


def _format_display_date(d: date) -> str:
    return f"{d.strftime('%b')} {d.day}, {d.year}"


def format_occasion_date(value: str | None) -> str:
    """Format an ISO date as "Dec 25, 2026", or "Date TBD" if missing."""
    parsed = parse_iso_date(value)
    if parsed is None:
        return _DATE_TBD
    return _format_display_date(parsed)


def format_birthday(value: str | None, today: date | None = None) -> str:
    """Format a birthday given as ISO ("1990-01-15") or month/day ("01-15").

    Month/day birthdays are shown in the current year. Returns "" when the
    value cannot be read.
    """
    if not value:
        return ""
    parts = value.split("-")
    if len(parts) == 2:
        today = today or primitives.today()
        try:
            return _format_display_date(
                primitives.make_date(today.year, int(parts[0]), int(parts[1]))
            )
        except (ValueError, OverflowError):
            return ""
    parsed = parse_iso_date(value)
    return _format_display_date(parsed) if parsed else ""


def format_occasion_display(occasion: Occasion) -> str:
    """e.g. "Birthday - Dec 25, 2026"."""
    label = format_occasion_type(occasion.occasion_type, occasion.custom_occasion)
    return f"{label} - {format_occasion_date(occasion.date)}"


def is_milestone_birthday(birthday: str | None, today: date | None = None) -> bool:
    """True for the age being turned this year when it is 30, 40, 50, ..."""
    born = parse_iso_date(birthday)
    if born is None:
        return False
    today = today or primitives.today()
    age = today.year - born.year
    return age >= 30 and age % 10 == 0


def fallback_recommendations(
    birthday: str | None,
    today: date | None = None,
) -> OccasionRecommendations:
    """Recommendations used when the suggestion service is unavailable."""
    primary: list[OccasionRecommendation] = []
    if birthday:
        primary.append(
            OccasionRecommendation(
                type=OccasionType.BIRTHDAY,
                name="Birthday",
                suggested_date=birthday,
                is_milestone=is_milestone_birthday(birthday, today=today),
                reasoning="Everyone deserves to feel special on their birthday.",
            )
        )
    return OccasionRecommendations(
        primary_occasions=primary,
        additional_suggestions=list(_FALLBACK_SUGGESTIONS),
    )


def map_recommendations_to_occasions(
    recommendations: OccasionRecommendations | None,
    today: date | None = None,
) -> list[Occasion]:
    """Turn recommended occasions into occasion records.

    A valid suggested date wins; otherwise the resolver fills the date in.
    Occasions it cannot date keep ``date=None`` so the UI asks the user.
    """
    if recommendations is None or not recommendations.primary_occasions:
        return []
    today = today or primitives.today()

    occasions: list[Occasion] = []
    for rec in recommendations.primary_occasions:
        if parse_iso_date(rec.suggested_date) is not None:
            resolved = rec.suggested_date
        else:
            resolved = resolve_occasion_date(rec.type, today=today) if rec.type else None
        occasions.append(
            Occasion(
                occasion_type=rec.type or OccasionType.CUSTOM,
                date=resolved,
                enabled=True,
            )
        )
    return occasions
