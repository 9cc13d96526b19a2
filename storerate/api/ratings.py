"""Rating routes: submit/overwrite, own rating, and the per-store breakdown."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from storerate.api.auth import get_current_user, require_normal_user
from storerate.core.database import get_db
from storerate.schemas.auth import CurrentUser
from storerate.schemas.rating import (
    OwnRatingResponse,
    RatingOut,
    RatingSubmitRequest,
    RatingSubmitResponse,
    StoreRatingsResponse,
)
from storerate.services import rating_service

router = APIRouter()


@router.post(
    "",
    response_model=RatingSubmitResponse,
    status_code=status.HTTP_201_CREATED,
    responses={200: {"description": "Existing rating overwritten"}},
)
def submit_rating(
    body: RatingSubmitRequest,
    response: Response,
    current_user: Annotated[CurrentUser, Depends(require_normal_user)],
    db: Annotated[Session, Depends(get_db)],
) -> RatingSubmitResponse:
    """
    Submit a 1-5 rating for a store. A second submission for the same store
    overwrites the first: 201 when created, 200 when updated.
    """
    rating, created = rating_service.submit_rating(
        db, current_user.id, body.store_id, body.value
    )
    if not created:
        response.status_code = status.HTTP_200_OK
    return RatingSubmitResponse(rating=RatingOut.model_validate(rating), created=created)


@router.get("/store/{store_id}", response_model=OwnRatingResponse)
def get_own_rating(
    store_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> OwnRatingResponse:
    """The caller's rating for the store, or null if they have not rated it."""
    rating = rating_service.get_own_rating(db, current_user.id, store_id)
    return OwnRatingResponse(
        store_id=store_id,
        rating=RatingOut.model_validate(rating) if rating is not None else None,
    )


@router.get("/store/{store_id}/all", response_model=StoreRatingsResponse)
def get_store_ratings(
    store_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> StoreRatingsResponse:
    """All ratings of a store with distribution (store owner of that store, or admin)."""
    return rating_service.get_store_ratings(db, current_user, store_id)
