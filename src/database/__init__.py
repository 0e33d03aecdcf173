"""Database package for the Movie API.

Provides connection management, ORM models, and repositories.

Usage:
    from src.database import Database, MovieRepository, create_db_engine

    database = Database(create_db_engine())
    with database.session() as session:
        movies = MovieRepository(session).search_by_title("matrix")
"""

from src.database.connection import Database, create_db_engine
from src.database.models import (
    Base,
    Genre,
    Movie,
    MovieGenre,
    Review,
    User,
)
from src.database.repositories import (
    BaseRepository,
    GenreRepository,
    MovieRepository,
    ReviewRepository,
    UserRepository,
)

__all__ = [
    # Connection
    "Database",
    "create_db_engine",
    # Models
    "Base",
    "Movie",
    "Genre",
    "MovieGenre",
    "User",
    "Review",
    # Repositories
    "BaseRepository",
    "MovieRepository",
    "GenreRepository",
    "UserRepository",
    "ReviewRepository",
]
