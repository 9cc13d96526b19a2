"""Read-only aggregates behind the admin, user and store-owner dashboards."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from storerate.models import Rating, Store, User
from storerate.schemas.dashboard import (
    AdminDashboard,
    StoreOwnerDashboard,
    UserDashboard,
    UserRatingItem,
)
from storerate.services.rating_service import round_average, store_ratings_summary


def admin_dashboard(db: Session) -> AdminDashboard:
    return AdminDashboard(
        total_users=db.query(func.count(User.id)).scalar() or 0,
        total_stores=db.query(func.count(Store.id)).scalar() or 0,
        total_ratings=db.query(func.count(Rating.id)).scalar() or 0,
    )


def user_dashboard(db: Session, user_id: int) -> UserDashboard:
    """The caller's own ratings, newest first."""
    rows = (
        db.query(Rating.store_id, Store.name, Store.address, Rating.value, Rating.updated_at)
        .join(Store, Store.id == Rating.store_id)
        .filter(Rating.user_id == user_id)
        .order_by(Rating.updated_at.desc(), Rating.id.desc())
        .all()
    )
    return UserDashboard(
        ratings_submitted=len(rows),
        ratings=[
            UserRatingItem(
                store_id=r.store_id,
                store_name=r.name,
                store_address=r.address,
                value=r.value,
                updated_at=r.updated_at,
            )
            for r in rows
        ],
    )


def store_owner_dashboard(db: Session, owner_id: int) -> StoreOwnerDashboard:
    """Per-store breakdown for every store the owner has, plus overall figures."""
    stores = db.query(Store).filter(Store.owner_id == owner_id).order_by(Store.id).all()
    avg, total = (
        db.query(func.avg(Rating.value), func.count(Rating.id))
        .join(Store, Store.id == Rating.store_id)
        .filter(Store.owner_id == owner_id)
        .one()
    )
    return StoreOwnerDashboard(
        average_rating=round_average(avg),
        total_ratings=total or 0,
        stores=[store_ratings_summary(db, s) for s in stores],
    )
