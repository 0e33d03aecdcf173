"""Genre endpoints for REST API."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.database import GenreRepo
from src.api.dependencies.payload import body_of
from src.api.errors import NotFoundError, ValidationError
from src.api.schemas import (
    CreatedResponse,
    DataResponse,
    ErrorResponse,
    GenrePayload,
    GenreRead,
)
from src.database.models import Genre

router = APIRouter(
    prefix="/api/genres",
    tags=["Genres"],
    responses={500: {"model": ErrorResponse, "description": "Store error"}},
)


@router.get(
    "",
    response_model=DataResponse[list[GenreRead]],
    summary="List genres",
)
def list_genres(repo: GenreRepo) -> DataResponse[list[GenreRead]]:
    """Get every genre ordered by id."""
    genres = repo.get_all()
    return DataResponse(data=[GenreRead.model_validate(g) for g in genres])


@router.get(
    "/{genre_id}",
    response_model=DataResponse[GenreRead],
    responses={404: {"model": ErrorResponse, "description": "Genre not found"}},
    summary="Get genre details",
)
def get_genre(genre_id: int, repo: GenreRepo) -> DataResponse[GenreRead]:
    """Get genre by ID.

    Args:
        genre_id: Genre primary key.
        repo: Genre repository.

    Returns:
        Genre details.

    Raises:
        NotFoundError: 404 if genre not found.
    """
    genre = repo.get_by_id(genre_id)
    if genre is None:
        raise NotFoundError.for_resource("Genre", genre_id)
    return DataResponse(data=GenreRead.model_validate(genre))


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Invalid request"}},
    summary="Create genre",
)
def create_genre(
    payload: Annotated[GenrePayload, Depends(body_of(GenrePayload))],
    repo: GenreRepo,
) -> CreatedResponse:
    """Insert a new genre.

    A duplicate name is rejected by the store's unique constraint (500).

    Raises:
        ValidationError: 400 if name is missing or empty.
    """
    if not payload.name:
        raise ValidationError("Genre name is required")
    genre = repo.create(Genre(name=payload.name, description=payload.description))
    return CreatedResponse(message="Genre created successfully", id=genre.genre_id)
