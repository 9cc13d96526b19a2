"""Request/response schemas for user management."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from storerate.core.validation import (
    ROLE_NORMAL,
    check_address,
    check_name,
    check_password,
    check_role,
)


class NewUserFields(BaseModel):
    """Fields and rules shared by self-registration and admin user creation."""

    name: str = Field(..., description="Full name (20-60 characters)")
    email: EmailStr = Field(..., description="Login email, unique")
    address: str = Field(..., description="Postal address (max 400 characters)")
    password: str = Field(
        ...,
        description="8-16 characters, one uppercase letter and one special character",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return check_name(v)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        return check_address(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return check_password(v)


class UserCreateRequest(NewUserFields):
    """Admin-side user creation; same field rules as registration plus a role."""

    role: str = ROLE_NORMAL

    @field_validator("role")
    @classmethod
    def validate_role(cls, v: str) -> str:
        return check_role(v)


class PasswordUpdateRequest(BaseModel):
    """Self-service password change."""

    current_password: str = Field(..., min_length=1, max_length=128)
    new_password: str

    @field_validator("new_password")
    @classmethod
    def validate_new_password(cls, v: str) -> str:
        return check_password(v)


class UserOut(BaseModel):
    """User entry as returned by the API (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    address: str
    role: str
    created_at: datetime | None = None


class OwnedStore(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    address: str


class UserDetail(UserOut):
    """Single user view; store owners also carry their stores and average rating."""

    average_rating: float | None = None
    stores: list[OwnedStore] = Field(default_factory=list)


class UsersListResponse(BaseModel):
    """Response for GET /users (admin only)."""

    users: list[UserOut]
    total: int
    page: int
    limit: int
    pages: int
