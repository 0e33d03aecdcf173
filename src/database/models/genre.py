"""Genre reference model."""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.database.models.base import Base

if TYPE_CHECKING:
    from src.database.models.movie import Movie


class Genre(Base):
    """Movie genre reference table.

    Attributes:
        genre_id: Primary key.
        name: Genre display name, unique.
        description: Optional longer description.
    """

    __tablename__ = "genres"

    genre_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)

    movies: Mapped[list["Movie"]] = relationship(
        "Movie",
        secondary="movie_genres",
        back_populates="genres",
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<Genre(genre_id={self.genre_id}, name='{self.name}')>"
