"""Request/response schemas for stores."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from storerate.core.validation import check_address, check_store_name


class StoreCreateRequest(BaseModel):
    """Admin-side store creation."""

    name: str = Field(..., description="Store name (1-60 characters)")
    email: EmailStr
    address: str = Field(..., description="Postal address (max 400 characters)")
    owner_id: int | None = Field(
        default=None, description="Id of a user with role store_owner"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return check_store_name(v)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        return check_address(v)


class StoreOut(BaseModel):
    """Store as seen by any authenticated user, with the caller's own rating."""

    id: int
    name: str
    email: str
    address: str
    average_rating: float | None = Field(
        default=None, description="Average of all ratings; null when unrated"
    )
    rating_count: int = 0
    user_rating: int | None = Field(
        default=None, description="The caller's rating for this store, if any"
    )


class StoreAdminOut(BaseModel):
    """Store as seen by admins, including owner info."""

    id: int
    name: str
    email: str
    address: str
    owner_id: int | None = None
    owner_name: str | None = None
    owner_email: str | None = None
    average_rating: float | None = None
    rating_count: int = 0
    created_at: datetime | None = None


class StoresListResponse(BaseModel):
    stores: list[StoreOut]
    total: int
    page: int
    limit: int
    pages: int


class AdminStoresListResponse(BaseModel):
    stores: list[StoreAdminOut]
    total: int
    page: int
    limit: int
    pages: int
