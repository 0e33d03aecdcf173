"""Database session and repository dependencies for FastAPI.

The ``Database`` built by the app factory lives on ``app.state`` and is
reached through the request, so tests can inject any engine.
"""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from src.database.connection import Database
from src.database.repositories import (
    GenreRepository,
    MovieRepository,
    ReviewRepository,
    UserRepository,
)


def get_database(request: Request) -> Database:
    """Return the application's shared Database."""
    return request.app.state.database


def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> Generator[Session, None, None]:
    """FastAPI dependency for database sessions.

    Yields:
        Database session, closed (connection back to the pool) after the request.

    Example:
        @router.get("/movies")
        def list_movies(db: Annotated[Session, Depends(get_db)]):
            return MovieRepository(db).get_all()
    """
    with database.session() as session:
        yield session


DbSession = Annotated[Session, Depends(get_db)]


def get_movie_repository(db: DbSession) -> MovieRepository:
    return MovieRepository(db)


def get_genre_repository(db: DbSession) -> GenreRepository:
    return GenreRepository(db)


def get_user_repository(db: DbSession) -> UserRepository:
    return UserRepository(db)


def get_review_repository(db: DbSession) -> ReviewRepository:
    return ReviewRepository(db)


MovieRepo = Annotated[MovieRepository, Depends(get_movie_repository)]
GenreRepo = Annotated[GenreRepository, Depends(get_genre_repository)]
UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
ReviewRepo = Annotated[ReviewRepository, Depends(get_review_repository)]
