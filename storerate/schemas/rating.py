"""Request/response schemas for ratings."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from storerate.core.validation import check_rating_value


class RatingSubmitRequest(BaseModel):
    """Submit or overwrite the caller's rating for a store."""

    store_id: StrictInt = Field(..., gt=0)
    value: StrictInt = Field(..., description="Integer 1-5")

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: int) -> int:
        return check_rating_value(v)


class RatingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    store_id: int
    value: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RatingSubmitResponse(BaseModel):
    rating: RatingOut
    created: bool = Field(..., description="False when an existing rating was overwritten")


class OwnRatingResponse(BaseModel):
    store_id: int
    rating: RatingOut | None = None


class StoreRater(BaseModel):
    """One rater of a store, as shown to the store owner and admins."""

    user_id: int
    name: str
    email: str
    value: int
    updated_at: datetime | None = None


class StoreRatingsResponse(BaseModel):
    """All ratings of one store with aggregate figures."""

    store_id: int
    store_name: str
    average_rating: float | None = None
    total_ratings: int = 0
    distribution: dict[int, int] = Field(
        default_factory=dict, description="Count of ratings per value 1-5"
    )
    ratings: list[StoreRater] = Field(default_factory=list)
