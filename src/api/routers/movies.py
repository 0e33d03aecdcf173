"""Movie endpoints for REST API.

Provides listing, lookup, title search, genre filtering and the
create/update/delete operations on movies.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.database import MovieRepo
from src.api.dependencies.payload import body_of
from src.api.errors import NotFoundError, ValidationError
from src.api.schemas import (
    CreatedResponse,
    DataResponse,
    ErrorResponse,
    MessageResponse,
    MoviePayload,
    MovieRead,
    MovieWithGenres,
    PaginationParams,
)
from src.database.models import Movie

router = APIRouter(
    prefix="/api/movies",
    tags=["Movies"],
    responses={500: {"model": ErrorResponse, "description": "Store error"}},
)

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Movie not found"}}
_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid request"}}

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


# =============================================================================
# DEPENDENCIES
# =============================================================================


def get_pagination(page: str | None = None, limit: str | None = None) -> PaginationParams:
    """Parse pagination parameters, falling back to defaults.

    Values that are missing, not integers, or below 1 are replaced
    by the defaults (page 1, limit 10).

    Args:
        page: Page number (1-indexed).
        limit: Items per page.

    Returns:
        Pagination parameters.
    """
    return PaginationParams(
        page=_positive_int(page, DEFAULT_PAGE),
        limit=_positive_int(limit, DEFAULT_LIMIT),
    )


MoviePayloadBody = Annotated[MoviePayload, Depends(body_of(MoviePayload))]


# =============================================================================
# ENDPOINTS
# =============================================================================


@router.get(
    "",
    response_model=DataResponse[list[MovieRead]],
    summary="List movies",
    description="Get a page of movies ordered by id.",
)
def list_movies(
    repo: MovieRepo,
    pagination: Annotated[PaginationParams, Depends(get_pagination)],
) -> DataResponse[list[MovieRead]]:
    """Get paginated movie list.

    Args:
        repo: Movie repository.
        pagination: Pagination parameters.

    Returns:
        Movies of the requested page.
    """
    movies = repo.get_all(limit=pagination.limit, offset=pagination.offset)
    return DataResponse(data=[MovieRead.model_validate(m) for m in movies])


@router.get(
    "/search",
    response_model=DataResponse[list[MovieRead]],
    responses=_BAD_REQUEST,
    summary="Search movies by title",
    description="Case-insensitive substring match on the title.",
)
def search_movies(repo: MovieRepo, title: str | None = None) -> DataResponse[list[MovieRead]]:
    """Search movies whose title contains ``title``.

    Args:
        repo: Movie repository.
        title: Substring to search for.

    Returns:
        Matching movies.

    Raises:
        ValidationError: 400 if title is missing or empty.
    """
    if not title:
        raise ValidationError("Title query parameter is required")
    movies = repo.search_by_title(title)
    return DataResponse(data=[MovieRead.model_validate(m) for m in movies])


@router.get(
    "/genre/{genre_id}",
    response_model=DataResponse[list[MovieRead]],
    summary="List movies of a genre",
)
def list_movies_by_genre(genre_id: int, repo: MovieRepo) -> DataResponse[list[MovieRead]]:
    """Get movies linked to a genre.

    An unknown genre yields an empty list.
    """
    movies = repo.get_by_genre(genre_id)
    return DataResponse(data=[MovieRead.model_validate(m) for m in movies])


@router.get(
    "/{movie_id}/with-genres",
    response_model=DataResponse[MovieWithGenres],
    responses=_NOT_FOUND,
    summary="Get movie with genres",
    description="Movie details plus comma-joined genre names.",
)
def get_movie_with_genres(movie_id: int, repo: MovieRepo) -> DataResponse[MovieWithGenres]:
    """Get movie by ID along with its genre names.

    Args:
        movie_id: Movie primary key.
        repo: Movie repository.

    Returns:
        Movie with a ``genres`` field (None when it has no genre).

    Raises:
        NotFoundError: 404 if movie not found.
    """
    row = repo.get_with_genres(movie_id)
    if row is None:
        raise NotFoundError.for_resource("Movie", movie_id)
    movie, genres = row
    data = MovieRead.model_validate(movie).model_dump()
    return DataResponse(data=MovieWithGenres(**data, genres=genres))


@router.get(
    "/{movie_id}",
    response_model=DataResponse[MovieRead],
    responses=_NOT_FOUND,
    summary="Get movie details",
)
def get_movie(movie_id: int, repo: MovieRepo) -> DataResponse[MovieRead]:
    """Get movie by ID.

    Raises:
        NotFoundError: 404 if movie not found.
    """
    movie = repo.get_by_id(movie_id)
    if movie is None:
        raise NotFoundError.for_resource("Movie", movie_id)
    return DataResponse(data=MovieRead.model_validate(movie))


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
    summary="Create movie",
)
def create_movie(payload: MoviePayloadBody, repo: MovieRepo) -> CreatedResponse:
    """Insert a new movie.

    Args:
        payload: Movie fields; title is required.
        repo: Movie repository.

    Returns:
        Confirmation with the new movie id.

    Raises:
        ValidationError: 400 if title is missing or empty.
    """
    _require_title(payload)
    movie = repo.create(Movie(**payload.model_dump()))
    return CreatedResponse(message="Movie created successfully", id=movie.movie_id)


@router.put(
    "/{movie_id}",
    response_model=MessageResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Update movie",
    description="Overwrite every movie field; omitted fields become null.",
)
def update_movie(movie_id: int, payload: MoviePayloadBody, repo: MovieRepo) -> MessageResponse:
    """Replace all fields of a movie.

    Raises:
        ValidationError: 400 if title is missing or empty.
        NotFoundError: 404 if movie not found.
    """
    _require_title(payload)
    if not repo.update_by_id(movie_id, payload.model_dump()):
        raise NotFoundError.for_resource("Movie", movie_id)
    return MessageResponse(message="Movie updated successfully")


@router.delete(
    "/{movie_id}",
    response_model=MessageResponse,
    responses=_NOT_FOUND,
    summary="Delete movie",
)
def delete_movie(movie_id: int, repo: MovieRepo) -> MessageResponse:
    """Delete a movie.

    Raises:
        NotFoundError: 404 if movie not found.
    """
    if not repo.delete_by_id(movie_id):
        raise NotFoundError.for_resource("Movie", movie_id)
    return MessageResponse(message="Movie deleted successfully")


# =============================================================================
# PRIVATE HELPERS
# =============================================================================


def _positive_int(raw: str | None, default: int) -> int:
    """Parse a positive integer, returning ``default`` otherwise."""
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        return default
    return value if value >= 1 else default


def _require_title(payload: MoviePayload) -> None:
    """Reject movie bodies without a non-empty title."""
    if not payload.title:
        raise ValidationError("Title is required")
