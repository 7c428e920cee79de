from pydantic import BaseModel, ConfigDict, Field


class MonthDay(BaseModel):
    """A recurring annual date with no year attached."""

    model_config = ConfigDict(frozen=True)

    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)


class Occasion(BaseModel):
    """An occasion record as stored by the calling application.

    ``date`` is ``None`` when no deterministic date exists and the user
    has to supply one.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str | None = None
    occasion_type: str
    custom_occasion: str | None = None
    date: str | None = None
    is_annual: bool = True
    enabled: bool = True


class OccasionRecommendation(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    type: str
    name: str
    suggested_date: str | None = None
    is_milestone: bool = False
    reasoning: str = ""


class OccasionRecommendations(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    primary_occasions: list[OccasionRecommendation] = []
    additional_suggestions: list[str] = []
