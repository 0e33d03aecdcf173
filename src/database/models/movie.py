"""Movie model and the movie/genre association table."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.database.models.base import Base

if TYPE_CHECKING:
    from src.database.models.genre import Genre
    from src.database.models.review import Review


class Movie(Base):
    """Movie catalog entry.

    Attributes:
        movie_id: Primary key.
        title: Display title, never empty.
        release_year: Year of first release.
        duration_minutes: Runtime in minutes.
        plot_summary: Free-text synopsis.
        rating: Aggregate rating (e.g. 7.8).
    """

    __tablename__ = "movies"

    movie_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    release_year: Mapped[int | None] = mapped_column(Integer)
    duration_minutes: Mapped[int | None] = mapped_column(Integer)
    plot_summary: Mapped[str | None] = mapped_column(Text)
    rating: Mapped[float | None] = mapped_column(Numeric(3, 1, asdecimal=False))

    # Relationships
    genres: Mapped[list["Genre"]] = relationship(
        "Genre",
        secondary="movie_genres",
        back_populates="movies",
    )
    reviews: Mapped[list["Review"]] = relationship("Review", back_populates="movie")

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<Movie(movie_id={self.movie_id}, title='{self.title}')>"


class MovieGenre(Base):
    """Many-to-many link between movies and genres."""

    __tablename__ = "movie_genres"

    movie_id: Mapped[int] = mapped_column(
        ForeignKey("movies.movie_id"),
        primary_key=True,
    )
    genre_id: Mapped[int] = mapped_column(
        ForeignKey("genres.genre_id"),
        primary_key=True,
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<MovieGenre(movie_id={self.movie_id}, genre_id={self.genre_id})>"
