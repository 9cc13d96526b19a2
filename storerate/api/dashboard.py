"""Role-scoped dashboard routes."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storerate.api.auth import require_admin, require_normal_user, require_store_owner
from storerate.core.database import get_db
from storerate.schemas.auth import CurrentUser
from storerate.schemas.dashboard import AdminDashboard, StoreOwnerDashboard, UserDashboard
from storerate.services import dashboard_service

router = APIRouter()


@router.get("/admin", response_model=AdminDashboard)
def admin_dashboard(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> AdminDashboard:
    """Total users, stores and ratings."""
    return dashboard_service.admin_dashboard(db)


@router.get("/user", response_model=UserDashboard)
def user_dashboard(
    current_user: Annotated[CurrentUser, Depends(require_normal_user)],
    db: Annotated[Session, Depends(get_db)],
) -> UserDashboard:
    return dashboard_service.user_dashboard(db, current_user.id)


@router.get("/store-owner", response_model=StoreOwnerDashboard)
def store_owner_dashboard(
    current_user: Annotated[CurrentUser, Depends(require_store_owner)],
    db: Annotated[Session, Depends(get_db)],
) -> StoreOwnerDashboard:
    """Average rating, counts, distribution and raters for the caller's stores."""
    return dashboard_service.store_owner_dashboard(db, current_user.id)
