"""User endpoints for REST API.

Only public profile columns are ever selected; credentials stay in
the store.
"""

from fastapi import APIRouter

from src.api.database import ReviewRepo, UserRepo
from src.api.errors import NotFoundError
from src.api.schemas import DataResponse, ErrorResponse, ReviewWithMovie, UserRead

router = APIRouter(
    prefix="/api/users",
    tags=["Users"],
    responses={500: {"model": ErrorResponse, "description": "Store error"}},
)


@router.get(
    "",
    response_model=DataResponse[list[UserRead]],
    summary="List users",
)
def list_users(repo: UserRepo) -> DataResponse[list[UserRead]]:
    """Get every user's public profile."""
    users = repo.get_all_public()
    return DataResponse(data=[UserRead.model_validate(dict(u)) for u in users])


@router.get(
    "/{user_id}",
    response_model=DataResponse[UserRead],
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
    summary="Get user profile",
)
def get_user(user_id: int, repo: UserRepo) -> DataResponse[UserRead]:
    """Get user by ID.

    Args:
        user_id: User primary key.
        repo: User repository.

    Returns:
        Public user profile.

    Raises:
        NotFoundError: 404 if user not found.
    """
    user = repo.get_public_by_id(user_id)
    if user is None:
        raise NotFoundError.for_resource("User", user_id)
    return DataResponse(data=UserRead.model_validate(dict(user)))


@router.get(
    "/{user_id}/reviews",
    response_model=DataResponse[list[ReviewWithMovie]],
    summary="List reviews written by a user",
)
def list_user_reviews(user_id: int, repo: ReviewRepo) -> DataResponse[list[ReviewWithMovie]]:
    """Get a user's reviews with each movie's title.

    An unknown user yields an empty list.
    """
    reviews = repo.get_by_user(user_id)
    return DataResponse(data=[ReviewWithMovie.model_validate(dict(r)) for r in reviews])
