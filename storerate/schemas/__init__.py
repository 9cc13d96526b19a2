"""Pydantic request/response schemas."""

from storerate.schemas.auth import (
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    VerifyResponse,
)
from storerate.schemas.dashboard import AdminDashboard, StoreOwnerDashboard, UserDashboard
from storerate.schemas.health import HealthResponse
from storerate.schemas.rating import (
    OwnRatingResponse,
    RatingOut,
    RatingSubmitRequest,
    RatingSubmitResponse,
    StoreRatingsResponse,
)
from storerate.schemas.store import (
    AdminStoresListResponse,
    StoreAdminOut,
    StoreCreateRequest,
    StoreOut,
    StoresListResponse,
)
from storerate.schemas.user import (
    PasswordUpdateRequest,
    UserCreateRequest,
    UserDetail,
    UserOut,
    UsersListResponse,
)

__all__ = [
    "AdminDashboard",
    "AdminStoresListResponse",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "OwnRatingResponse",
    "PasswordUpdateRequest",
    "RatingOut",
    "RatingSubmitRequest",
    "RatingSubmitResponse",
    "RegisterRequest",
    "StoreAdminOut",
    "StoreCreateRequest",
    "StoreOut",
    "StoreOwnerDashboard",
    "StoreRatingsResponse",
    "StoresListResponse",
    "TokenResponse",
    "UserCreateRequest",
    "UserDashboard",
    "UserDetail",
    "UserOut",
    "UsersListResponse",
    "VerifyResponse",
]
