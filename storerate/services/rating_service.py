"""Ratings: upsert per (user, store), own-rating lookup, per-store breakdown."""

import logging
from decimal import Decimal

from sqlalchemy import func, literal_column
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storerate.core.errors import AuthorizationError, ConflictError, NotFoundError
from storerate.core.validation import RATING_MAX, RATING_MIN, ROLE_ADMIN, ROLE_STORE_OWNER
from storerate.models import Rating, Store, User
from storerate.schemas.auth import CurrentUser
from storerate.schemas.rating import StoreRater, StoreRatingsResponse

logger = logging.getLogger(__name__)

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def round_average(value: float | Decimal | None) -> float | None:
    """Round an AVG() result to 2 decimals; None (no ratings) stays None."""
    if value is None:
        return None
    return round(float(value), 2)


def get_store_or_404(db: Session, store_id: int) -> Store:
    store = db.get(Store, store_id)
    if store is None:
        raise NotFoundError("Store not found")
    return store


def _upsert_statement(dialect: str, user_id: int, store_id: int, value: int):
    try:
        insert = _DIALECT_INSERTS[dialect]
    except KeyError:
        raise RuntimeError(f"Rating upsert is not supported on dialect {dialect!r}")
    stmt = insert(Rating).values(user_id=user_id, store_id=store_id, value=value)
    stmt = stmt.on_conflict_do_update(
        index_elements=["user_id", "store_id"],
        set_={"value": stmt.excluded["value"], "updated_at": func.now()},
    )
    if dialect == "postgresql":
        # xmax is 0 only on a row version written by INSERT
        stmt = stmt.returning(literal_column("(xmax = 0)").label("inserted"))
    return stmt


def _rating_exists(db: Session, user_id: int, store_id: int) -> bool:
    return (
        db.query(Rating.id)
        .filter(Rating.user_id == user_id, Rating.store_id == store_id)
        .first()
        is not None
    )


def submit_rating(
    db: Session, user_id: int, store_id: int, value: int
) -> tuple[Rating, bool]:
    """
    Insert or overwrite the user's rating for the store in one statement.

    The unique (user_id, store_id) constraint drives the conflict branch, so
    concurrent submissions by the same user still leave exactly one row.
    Returns (rating, created) where created is False for an overwrite. On
    PostgreSQL the flag comes from the upsert itself; on SQLite it is read
    just before the write, so two racing first submissions may both report
    created.
    """
    get_store_or_404(db, store_id)
    dialect = db.get_bind().dialect.name
    stmt = _upsert_statement(dialect, user_id, store_id, value)
    try:
        if dialect == "postgresql":
            created = bool(db.execute(stmt).scalar_one())
        else:
            created = not _rating_exists(db, user_id, store_id)
            db.execute(stmt)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("Rating could not be saved; please retry.") from e
    rating = (
        db.query(Rating)
        .filter(Rating.user_id == user_id, Rating.store_id == store_id)
        .one()
    )
    logger.info(
        "Rating %s: user_id=%s store_id=%s value=%s",
        "created" if created else "updated",
        user_id,
        store_id,
        value,
    )
    return rating, created


def get_own_rating(db: Session, user_id: int, store_id: int) -> Rating | None:
    get_store_or_404(db, store_id)
    return (
        db.query(Rating)
        .filter(Rating.user_id == user_id, Rating.store_id == store_id)
        .first()
    )


def rating_distribution(db: Session, store_id: int) -> dict[int, int]:
    """Count of ratings per value 1-5; values nobody chose map to 0."""
    rows = (
        db.query(Rating.value, func.count(Rating.id))
        .filter(Rating.store_id == store_id)
        .group_by(Rating.value)
        .all()
    )
    distribution = {v: 0 for v in range(RATING_MIN, RATING_MAX + 1)}
    for value, count in rows:
        distribution[int(value)] = int(count)
    return distribution


def store_ratings_summary(db: Session, store: Store) -> StoreRatingsResponse:
    """Average, count, distribution and rater list for one store."""
    avg, total = (
        db.query(func.avg(Rating.value), func.count(Rating.id))
        .filter(Rating.store_id == store.id)
        .one()
    )
    raters = (
        db.query(User.id, User.name, User.email, Rating.value, Rating.updated_at)
        .join(Rating, Rating.user_id == User.id)
        .filter(Rating.store_id == store.id)
        .order_by(Rating.updated_at.desc(), Rating.id.desc())
        .all()
    )
    return StoreRatingsResponse(
        store_id=store.id,
        store_name=store.name,
        average_rating=round_average(avg),
        total_ratings=total or 0,
        distribution=rating_distribution(db, store.id),
        ratings=[
            StoreRater(
                user_id=r.id,
                name=r.name,
                email=r.email,
                value=r.value,
                updated_at=r.updated_at,
            )
            for r in raters
        ],
    )


def get_store_ratings(
    db: Session, current_user: CurrentUser, store_id: int
) -> StoreRatingsResponse:
    """All ratings of a store; only admins and the store's own owner may look."""
    store = get_store_or_404(db, store_id)
    if current_user.role == ROLE_ADMIN:
        return store_ratings_summary(db, store)
    if current_user.role == ROLE_STORE_OWNER and store.owner_id == current_user.id:
        return store_ratings_summary(db, store)
    raise AuthorizationError("Only the store owner or an admin can view all ratings")
