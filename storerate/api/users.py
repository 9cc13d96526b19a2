"""User management routes (admin only, except the self-service password change)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from storerate.api.auth import get_current_user, require_admin
from storerate.core.database import get_db
from storerate.schemas.auth import CurrentUser
from storerate.schemas.user import (
    PasswordUpdateRequest,
    UserCreateRequest,
    UserDetail,
    UserOut,
    UsersListResponse,
)
from storerate.services import user_service
from storerate.services.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    SortOrder,
    page_count,
)
from storerate.services.user_service import UserSortField

router = APIRouter()


@router.get("", response_model=UsersListResponse)
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
    name: str | None = Query(default=None, max_length=60),
    email: str | None = Query(default=None, max_length=255),
    address: str | None = Query(default=None, max_length=400),
    role: str | None = Query(default=None, max_length=32),
    sort_by: UserSortField = "name",
    sort_order: SortOrder = "asc",
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
) -> UsersListResponse:
    """List users with substring filters, sorting and pagination (admin only)."""
    users, total = user_service.list_users(
        db,
        name=name,
        email=email,
        address=address,
        role=role,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
    )
    return UsersListResponse(
        users=[UserOut.model_validate(u) for u in users],
        total=total,
        page=page,
        limit=limit,
        pages=page_count(total, limit),
    )


@router.post("", response_model=UserOut, status_code=201)
def create_user(
    body: UserCreateRequest,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UserOut:
    """Create a user with any role (admin only)."""
    user = user_service.create_user(
        db,
        name=body.name,
        email=body.email,
        address=body.address,
        password=body.password,
        role=body.role,
    )
    return UserOut.model_validate(user)


@router.patch("/password", status_code=status.HTTP_204_NO_CONTENT)
def update_password(
    body: PasswordUpdateRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    """Change the caller's own password; the current password must be supplied."""
    user_service.update_password(
        db, current_user.id, body.current_password, body.new_password
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}", response_model=UserDetail)
def get_user(
    user_id: int,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UserDetail:
    """User details; store owners also include their stores and average rating."""
    return user_service.get_user_detail(db, user_id)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    """Delete a user and, through the foreign keys, their ratings (admin only)."""
    user_service.delete_user(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
