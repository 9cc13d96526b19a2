"""Response schemas for the role-scoped dashboards."""

from datetime import datetime

from pydantic import BaseModel, Field

from storerate.schemas.rating import StoreRatingsResponse


class AdminDashboard(BaseModel):
    total_users: int
    total_stores: int
    total_ratings: int


class UserRatingItem(BaseModel):
    store_id: int
    store_name: str
    store_address: str
    value: int
    updated_at: datetime | None = None


class UserDashboard(BaseModel):
    ratings_submitted: int
    ratings: list[UserRatingItem] = Field(default_factory=list)


class StoreOwnerDashboard(BaseModel):
    """Aggregates across every store the caller owns, plus a per-store breakdown."""

    average_rating: float | None = None
    total_ratings: int = 0
    stores: list[StoreRatingsResponse] = Field(default_factory=list)
