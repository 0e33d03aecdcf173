"""Repository layer for database operations.

Usage:
    from src.database.repositories import MovieRepository

    repo = MovieRepository(session)
    movies = repo.search_by_title("alien")
"""

from src.database.repositories.base import BaseRepository
from src.database.repositories.genre import GenreRepository
from src.database.repositories.movie import MovieRepository
from src.database.repositories.review import ReviewRepository
from src.database.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "GenreRepository",
    "MovieRepository",
    "ReviewRepository",
    "UserRepository",
]
