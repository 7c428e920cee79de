from giftdates.dates.next_occurrence import (
    next_occurrence,
    next_occurrence_from_iso_date,
    next_occurrence_from_month_day,
)
from giftdates.dates.resolver import (
    normalize_occasion_type,
    parse_occasion_type,
    resolve_occasion_date,
    supported_occasion_types,
)

__all__ = [
    "next_occurrence",
    "next_occurrence_from_iso_date",
    "next_occurrence_from_month_day",
    "normalize_occasion_type",
    "parse_occasion_type",
    "resolve_occasion_date",
    "supported_occasion_types",
]
