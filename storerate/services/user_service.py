"""User management: admin CRUD over accounts and self-service password change."""

import logging
from typing import Literal

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storerate.core.errors import AuthenticationError, ConflictError, NotFoundError
from storerate.core.security import hash_password, verify_password
from storerate.core.validation import ROLE_STORE_OWNER
from storerate.models import Rating, Store, User
from storerate.schemas.user import OwnedStore, UserDetail
from storerate.services.pagination import SortOrder, apply_sort, paginate
from storerate.services.rating_service import round_average

logger = logging.getLogger(__name__)

UserSortField = Literal["id", "name", "email", "address", "role", "created_at"]

USER_SORT_COLUMNS = {
    "id": User.id,
    "name": User.name,
    "email": User.email,
    "address": User.address,
    "role": User.role,
    "created_at": User.created_at,
}


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email.strip().lower()).first()


def get_user(db: Session, user_id: int) -> User:
    """Return the user or raise NotFoundError."""
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def list_users(
    db: Session,
    *,
    name: str | None = None,
    email: str | None = None,
    address: str | None = None,
    role: str | None = None,
    sort_by: UserSortField = "name",
    sort_order: SortOrder = "asc",
    page: int = 1,
    limit: int = 10,
) -> tuple[list[User], int]:
    """
    Filter users by case-insensitive substring on name/email/address/role,
    sort by any listed column and return one page plus the total match count.
    """
    query = db.query(User)
    if name:
        query = query.filter(User.name.ilike(f"%{name}%"))
    if email:
        query = query.filter(User.email.ilike(f"%{email}%"))
    if address:
        query = query.filter(User.address.ilike(f"%{address}%"))
    if role:
        query = query.filter(User.role.ilike(f"%{role}%"))
    query = apply_sort(query, USER_SORT_COLUMNS[sort_by], sort_order, User.id)
    return paginate(query, page, limit)


def create_user(
    db: Session,
    *,
    name: str,
    email: str,
    address: str,
    password: str,
    role: str,
) -> User:
    """Persist a new user. Fields must already be validated; raises ConflictError on duplicate email."""
    email = email.strip().lower()
    if get_user_by_email(db, email) is not None:
        raise ConflictError("A user with this email already exists.")
    user = User(
        name=name,
        email=email,
        address=address,
        password_hash=hash_password(password),
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race against a concurrent insert of the same email.
        db.rollback()
        raise ConflictError("A user with this email already exists.") from e
    db.refresh(user)
    logger.info("Created user id=%s role=%s", user.id, user.role)
    return user


def owner_average_rating(db: Session, owner_id: int) -> float | None:
    """Average over every rating of every store owned by owner_id (None if unrated)."""
    avg = (
        db.query(func.avg(Rating.value))
        .join(Store, Store.id == Rating.store_id)
        .filter(Store.owner_id == owner_id)
        .scalar()
    )
    return round_average(avg)


def get_user_detail(db: Session, user_id: int) -> UserDetail:
    user = get_user(db, user_id)
    detail = UserDetail.model_validate(user)
    if user.role == ROLE_STORE_OWNER:
        stores = (
            db.query(Store).filter(Store.owner_id == user.id).order_by(Store.id).all()
        )
        detail.stores = [OwnedStore.model_validate(s) for s in stores]
        detail.average_rating = owner_average_rating(db, user.id)
    return detail


def update_password(
    db: Session, user_id: int, current_password: str, new_password: str
) -> None:
    """Change the caller's own password after checking the current one."""
    user = get_user(db, user_id)
    if not verify_password(current_password, user.password_hash):
        raise AuthenticationError("Current password is incorrect.")
    user.password_hash = hash_password(new_password)
    db.commit()
    logger.info("Password updated for user id=%s", user_id)


def delete_user(db: Session, user_id: int) -> None:
    """Delete one user; their ratings cascade and owned stores lose their owner."""
    user = get_user(db, user_id)
    db.delete(user)
    db.commit()
    logger.info("Deleted user id=%s", user_id)
