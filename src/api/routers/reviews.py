"""Review endpoints for REST API."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.database import ReviewRepo
from src.api.dependencies.payload import body_of
from src.api.errors import ValidationError
from src.api.schemas import (
    CreatedResponse,
    DataResponse,
    ErrorResponse,
    ReviewDetail,
    ReviewPayload,
    ReviewWithUser,
)
from src.database.models import RATING_MAX, RATING_MIN, Review

router = APIRouter(
    prefix="/api/reviews",
    tags=["Reviews"],
    responses={500: {"model": ErrorResponse, "description": "Store error"}},
)


@router.get(
    "",
    response_model=DataResponse[list[ReviewDetail]],
    summary="List reviews",
    description="Every review with its author's username and the movie title.",
)
def list_reviews(repo: ReviewRepo) -> DataResponse[list[ReviewDetail]]:
    """Get all reviews with username and movie title."""
    reviews = repo.get_all_detailed()
    return DataResponse(data=[ReviewDetail.model_validate(dict(r)) for r in reviews])


@router.get(
    "/movie/{movie_id}",
    response_model=DataResponse[list[ReviewWithUser]],
    summary="List reviews of a movie",
)
def list_movie_reviews(movie_id: int, repo: ReviewRepo) -> DataResponse[list[ReviewWithUser]]:
    """Get a movie's reviews with each author's username.

    An unknown movie yields an empty list.
    """
    reviews = repo.get_by_movie(movie_id)
    return DataResponse(data=[ReviewWithUser.model_validate(dict(r)) for r in reviews])


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Invalid request"}},
    summary="Create review",
)
def create_review(
    payload: Annotated[ReviewPayload, Depends(body_of(ReviewPayload))],
    repo: ReviewRepo,
) -> CreatedResponse:
    """Insert a new review.

    Args:
        payload: Review fields; movie_id, user_id and rating are required.
        repo: Review repository.

    Returns:
        Confirmation with the new review id.

    Raises:
        ValidationError: 400 if a required field is missing or the
            rating is outside 1..10.
    """
    _validate_review(payload)
    review = repo.create(Review(**payload.model_dump()))
    return CreatedResponse(message="Review created successfully", id=review.review_id)


def _validate_review(payload: ReviewPayload) -> None:
    """Check required fields and the rating range before any query."""
    # zero ids and a zero rating count as missing
    if not (payload.movie_id and payload.user_id and payload.rating):
        raise ValidationError("Movie ID, user ID, and rating are required")
    if not RATING_MIN <= payload.rating <= RATING_MAX:
        raise ValidationError(f"Rating must be between {RATING_MIN} and {RATING_MAX}")
