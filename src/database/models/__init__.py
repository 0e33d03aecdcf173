"""SQLAlchemy ORM models for the movie database.

This module exports all database models and the Base class
for use throughout the application.

Usage:
    from src.database.models import Base, Movie, Review

Tables:
    - movies: Movie catalog
    - genres: Genre reference data
    - movie_genres: Movie-Genre association
    - users: Reviewer accounts
    - reviews: User ratings of movies
"""

from src.database.models.base import Base, CreatedAtMixin
from src.database.models.genre import Genre
from src.database.models.movie import Movie, MovieGenre
from src.database.models.review import RATING_MAX, RATING_MIN, Review
from src.database.models.user import User

__all__ = [
    "Base",
    "CreatedAtMixin",
    "Genre",
    "Movie",
    "MovieGenre",
    "RATING_MAX",
    "RATING_MIN",
    "Review",
    "User",
]
