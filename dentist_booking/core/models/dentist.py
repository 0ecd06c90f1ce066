"""
Dentist and review models.
"""

from typing import Any, List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .common import BackendModel, coerce_ref


class Review(BackendModel):
    """A patient review of a dentist as returned by the backend."""

    id: Optional[str] = Field(default=None, validation_alias=AliasChoices("_id", "id"))
    dentist: Optional[str] = None
    user: Optional[str] = None
    rating: int = 0
    review: str = ""

    @field_validator("dentist", "user", mode="before")
    @classmethod
    def _ref(cls, value: Any) -> Optional[str]:
        return coerce_ref(value)

    @field_validator("review", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return value or ""


class ReviewSubmission(BaseModel):
    """Payload for submitting a review."""

    model_config = ConfigDict(extra="forbid")

    rating: int = Field(ge=1, le=5)
    review: str = Field(min_length=1)


def normalize_expertise(value: Any) -> List[str]:
    """
    Normalize area_expertise to a list of tags.

    Older backend records store a single string, newer ones a list.
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = value.strip()
        return [value] if value else []
    if isinstance(value, (list, tuple)):
        tags: List[str] = []
        for item in value:
            if isinstance(item, str) and item.strip() and item.strip() not in tags:
                tags.append(item.strip())
        return tags
    return []


class Dentist(BackendModel):
    """Dentist record: profile, pricing and expertise tags."""

    id: str = Field(default="", validation_alias=AliasChoices("_id", "id"))
    name: str = ""
    area_expertise: List[str] = Field(default_factory=list)
    year_experience: int = 0
    starting_price: float = Field(
        default=0.0, validation_alias=AliasChoices("StartingPrice", "starting_price")
    )
    picture: Optional[str] = None
    bio: Optional[str] = None
    rating: List[Review] = Field(default_factory=list)

    @field_validator("area_expertise", mode="before")
    @classmethod
    def _expertise(cls, value: Any) -> List[str]:
        return normalize_expertise(value)

    @field_validator("year_experience", "starting_price", mode="before")
    @classmethod
    def _number(cls, value: Any) -> Any:
        return 0 if value is None or value == "" else value

    @field_validator("rating", mode="before")
    @classmethod
    def _ratings(cls, value: Any) -> List[Any]:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, dict)]

    def average_rating(self) -> Optional[float]:
        """Mean star rating, or None when there are no reviews."""
        scores = [r.rating for r in self.rating if 1 <= r.rating <= 5]
        if not scores:
            return None
        return round(sum(scores) / len(scores), 2)
