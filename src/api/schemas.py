"""Pydantic schemas for API request/response validation.

Defines the response envelope, resource read models, request bodies
and health payloads.
"""

from datetime import datetime, timezone
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")

# =============================================================================
# ENVELOPES
# =============================================================================


class DataResponse(BaseModel, Generic[DataT]):
    """Successful read: ``{"status": "success", "data": ...}``."""

    status: Literal["success"] = "success"
    data: DataT


class CreatedResponse(BaseModel):
    """Successful insert, carrying the new row id."""

    status: Literal["success"] = "success"
    message: str = Field(examples=["Movie created successfully"])
    id: int


class MessageResponse(BaseModel):
    """Successful update or delete."""

    status: Literal["success"] = "success"
    message: str = Field(examples=["Movie updated successfully"])


class ErrorResponse(BaseModel):
    """Error envelope shared by every failure."""

    status: Literal["error"] = "error"
    message: str = Field(examples=["Movie with id 42 not found"])


class RootResponse(BaseModel):
    """Root endpoint payload."""

    info: str


# =============================================================================
# PAGINATION
# =============================================================================


class PaginationParams(BaseModel):
    """Offset pagination parameters."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)

    @property
    def offset(self) -> int:
        """Calculate SQL offset from page number."""
        return (self.page - 1) * self.limit


# =============================================================================
# MOVIE SCHEMAS
# =============================================================================


class MovieRead(BaseModel):
    """Movie row as stored."""

    model_config = ConfigDict(from_attributes=True)

    movie_id: int
    title: str
    release_year: int | None = None
    duration_minutes: int | None = None
    plot_summary: str | None = None
    rating: float | None = None


class MovieWithGenres(MovieRead):
    """Movie row plus its comma-joined genre names."""

    genres: str | None = Field(default=None, examples=["Drama,Crime"])


class MoviePayload(BaseModel):
    """Body of movie create and update requests.

    Fields are optional at parse time; the handler reports a missing
    title with its own message.
    """

    title: str | None = None
    release_year: int | None = None
    duration_minutes: int | None = None
    plot_summary: str | None = None
    rating: float | None = None


# =============================================================================
# GENRE SCHEMAS
# =============================================================================


class GenreRead(BaseModel):
    """Genre row as stored."""

    model_config = ConfigDict(from_attributes=True)

    genre_id: int
    name: str
    description: str | None = None


class GenrePayload(BaseModel):
    """Body of genre create requests."""

    name: str | None = None
    description: str | None = None


# =============================================================================
# USER SCHEMAS
# =============================================================================


class UserRead(BaseModel):
    """Public user profile. Has no credential fields."""

    model_config = ConfigDict(from_attributes=True)

    user_id: int
    username: str | None = None
    email: str | None = None
    is_active: bool | None = None
    created_at: datetime | None = None


# =============================================================================
# REVIEW SCHEMAS
# =============================================================================


class ReviewRead(BaseModel):
    """Review row as stored."""

    model_config = ConfigDict(from_attributes=True)

    review_id: int
    movie_id: int
    user_id: int
    rating: int
    review_text: str | None = None
    created_at: datetime | None = None


class ReviewWithMovie(ReviewRead):
    """Review with the reviewed movie's title."""

    movie_title: str


class ReviewWithUser(ReviewRead):
    """Review with the author's username."""

    username: str | None = None


class ReviewDetail(ReviewRead):
    """Review with both author username and movie title."""

    username: str | None = None
    movie_title: str


class ReviewPayload(BaseModel):
    """Body of review create requests."""

    movie_id: int | None = None
    user_id: int | None = None
    rating: int | None = None
    review_text: str | None = None


# =============================================================================
# HEALTH
# =============================================================================


class DatabaseComponentHealth(BaseModel):
    """Database connection health status."""

    connected: bool = False
    pool_available: int | None = None


class HealthComponents(BaseModel):
    """Health status of all system components."""

    database: DatabaseComponentHealth = Field(default_factory=DatabaseComponentHealth)


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(examples=["healthy"])
    version: str = Field(examples=["1.0.0"])
    components: HealthComponents = Field(default_factory=HealthComponents)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
