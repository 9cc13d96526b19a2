"""Stores: listing with computed averages, admin view with owners, creation."""

import logging
from typing import Literal

from sqlalchemy import and_, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session, aliased

from storerate.core.errors import ConflictError, NotFoundError, ValidationError
from storerate.core.validation import ROLE_STORE_OWNER
from storerate.models import Rating, Store, User
from storerate.schemas.store import StoreAdminOut, StoreOut
from storerate.services.pagination import SortOrder, apply_sort, paginate
from storerate.services.rating_service import round_average

logger = logging.getLogger(__name__)

StoreSortField = Literal["id", "name", "email", "address", "average_rating", "created_at"]


def _rating_stats(db: Session):
    """Per-store AVG/COUNT over ratings, as a joinable subquery."""
    return (
        db.query(
            Rating.store_id.label("store_id"),
            func.avg(Rating.value).label("average_rating"),
            func.count(Rating.id).label("rating_count"),
        )
        .group_by(Rating.store_id)
        .subquery()
    )


def _sort_column(sort_by: str, stats):
    columns = {
        "id": Store.id,
        "name": Store.name,
        "email": Store.email,
        "address": Store.address,
        "created_at": Store.created_at,
        "average_rating": stats.c.average_rating,
    }
    return columns[sort_by]


def _apply_filters(
    query: Query,
    name: str | None,
    address: str | None,
    email: str | None = None,
) -> Query:
    if name:
        query = query.filter(Store.name.ilike(f"%{name}%"))
    if address:
        query = query.filter(Store.address.ilike(f"%{address}%"))
    if email:
        query = query.filter(Store.email.ilike(f"%{email}%"))
    return query


def _user_view_query(db: Session, user_id: int) -> tuple[Query, object]:
    stats = _rating_stats(db)
    own = aliased(Rating)
    query = (
        db.query(
            Store,
            stats.c.average_rating,
            stats.c.rating_count,
            own.value.label("user_rating"),
        )
        .outerjoin(stats, stats.c.store_id == Store.id)
        .outerjoin(own, and_(own.store_id == Store.id, own.user_id == user_id))
    )
    return query, stats


def _to_store_out(row) -> StoreOut:
    store = row[0]
    return StoreOut(
        id=store.id,
        name=store.name,
        email=store.email,
        address=store.address,
        average_rating=round_average(row.average_rating),
        rating_count=row.rating_count or 0,
        user_rating=row.user_rating,
    )


def list_stores(
    db: Session,
    user_id: int,
    *,
    name: str | None = None,
    address: str | None = None,
    sort_by: StoreSortField = "name",
    sort_order: SortOrder = "asc",
    page: int = 1,
    limit: int = 10,
) -> tuple[list[StoreOut], int]:
    """Stores with their average rating and the caller's own rating."""
    query, stats = _user_view_query(db, user_id)
    query = _apply_filters(query, name, address)
    query = apply_sort(
        query,
        _sort_column(sort_by, stats),
        sort_order,
        Store.id,
        nulls_last=sort_by == "average_rating",
    )
    rows, total = paginate(query, page, limit)
    return [_to_store_out(r) for r in rows], total


def get_store(db: Session, store_id: int, user_id: int) -> StoreOut:
    query, _ = _user_view_query(db, user_id)
    row = query.filter(Store.id == store_id).first()
    if row is None:
        raise NotFoundError("Store not found")
    return _to_store_out(row)


def list_stores_admin(
    db: Session,
    *,
    name: str | None = None,
    email: str | None = None,
    address: str | None = None,
    sort_by: StoreSortField = "name",
    sort_order: SortOrder = "asc",
    page: int = 1,
    limit: int = 10,
) -> tuple[list[StoreAdminOut], int]:
    """Admin listing: adds owner name/email alongside the computed average."""
    stats = _rating_stats(db)
    owner = aliased(User)
    query = (
        db.query(
            Store,
            stats.c.average_rating,
            stats.c.rating_count,
            owner.name.label("owner_name"),
            owner.email.label("owner_email"),
        )
        .outerjoin(stats, stats.c.store_id == Store.id)
        .outerjoin(owner, owner.id == Store.owner_id)
    )
    query = _apply_filters(query, name, address, email)
    query = apply_sort(
        query,
        _sort_column(sort_by, stats),
        sort_order,
        Store.id,
        nulls_last=sort_by == "average_rating",
    )
    rows, total = paginate(query, page, limit)
    stores = [
        StoreAdminOut(
            id=r[0].id,
            name=r[0].name,
            email=r[0].email,
            address=r[0].address,
            owner_id=r[0].owner_id,
            owner_name=r.owner_name,
            owner_email=r.owner_email,
            average_rating=round_average(r.average_rating),
            rating_count=r.rating_count or 0,
            created_at=r[0].created_at,
        )
        for r in rows
    ]
    return stores, total


def create_store(
    db: Session,
    *,
    name: str,
    email: str,
    address: str,
    owner_id: int | None = None,
) -> Store:
    """Create a store; owner_id, when given, must be an existing store_owner."""
    if owner_id is not None:
        owner = db.get(User, owner_id)
        if owner is None:
            raise NotFoundError("Owner user not found")
        if owner.role != ROLE_STORE_OWNER:
            raise ValidationError("owner_id", "Owner must have the store_owner role.")
    email = email.strip().lower()
    if db.query(Store.id).filter(Store.email == email).first() is not None:
        raise ConflictError("A store with this email already exists.")
    store = Store(name=name, email=email, address=address, owner_id=owner_id)
    db.add(store)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("A store with this email already exists.") from e
    db.refresh(store)
    logger.info("Created store id=%s owner_id=%s", store.id, owner_id)
    return store