"""Store routes: listing for every signed-in user, admin listing and creation."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from storerate.api.auth import get_current_user, require_admin
from storerate.core.database import get_db
from storerate.schemas.auth import CurrentUser
from storerate.schemas.store import (
    AdminStoresListResponse,
    StoreCreateRequest,
    StoreOut,
    StoresListResponse,
)
from storerate.services import store_service
from storerate.services.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    SortOrder,
    page_count,
)
from storerate.services.store_service import StoreSortField

router = APIRouter()


@router.get("", response_model=StoresListResponse)
def list_stores(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    name: str | None = Query(default=None, max_length=60),
    address: str | None = Query(default=None, max_length=400),
    sort_by: StoreSortField = "name",
    sort_order: SortOrder = "asc",
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
) -> StoresListResponse:
    """
    List stores with their average rating (null when unrated), rating count,
    and the caller's own rating (null when the caller has not rated the store).
    """
    stores, total = store_service.list_stores(
        db,
        current_user.id,
        name=name,
        address=address,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
    )
    return StoresListResponse(
        stores=stores,
        total=total,
        page=page,
        limit=limit,
        pages=page_count(total, limit),
    )


@router.get("/admin", response_model=AdminStoresListResponse)
def list_stores_admin(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
    name: str | None = Query(default=None, max_length=60),
    email: str | None = Query(default=None, max_length=255),
    address: str | None = Query(default=None, max_length=400),
    sort_by: StoreSortField = "name",
    sort_order: SortOrder = "asc",
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
) -> AdminStoresListResponse:
    """List stores with owner details (admin only)."""
    stores, total = store_service.list_stores_admin(
        db,
        name=name,
        email=email,
        address=address,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
    )
    return AdminStoresListResponse(
        stores=stores,
        total=total,
        page=page,
        limit=limit,
        pages=page_count(total, limit),
    )


@router.post("", response_model=StoreOut, status_code=201)
def create_store(
    body: StoreCreateRequest,
    current_user: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> StoreOut:
    """Create a store, optionally assigning a store_owner user (admin only)."""
    store = store_service.create_store(
        db,
        name=body.name,
        email=body.email,
        address=body.address,
        owner_id=body.owner_id,
    )
    return store_service.get_store(db, store.id, current_user.id)


@router.get("/{store_id}", response_model=StoreOut)
def get_store(
    store_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> StoreOut:
    return store_service.get_store(db, store_id, current_user.id)
