from giftdates.models.enums import OccasionType, SolarEvent
from giftdates.models.occasion import (
    MonthDay,
    Occasion,
    OccasionRecommendation,
    OccasionRecommendations,
)

__all__ = [
    "MonthDay",
    "Occasion",
    "OccasionRecommendation",
    "OccasionRecommendations",
    "OccasionType",
    "SolarEvent",
]
