"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from storerate.schemas.user import NewUserFields, UserOut


class RegisterRequest(NewUserFields):
    """Self-registration payload; the account is always created with role 'normal'."""


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=255, description="Email")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class TokenResponse(BaseModel):
    """JWT access token returned after successful login or registration."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    user: UserOut


class VerifyResponse(BaseModel):
    """Result of GET /auth/verify."""

    valid: bool = True
    user: UserOut


class CurrentUser(BaseModel):
    """Authenticated user (id, name, email, role) for dependency injection."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: str
