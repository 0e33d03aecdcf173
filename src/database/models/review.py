"""Review model linking a user's rating to a movie."""

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.database.models.base import Base, CreatedAtMixin

if TYPE_CHECKING:
    from src.database.models.movie import Movie
    from src.database.models.user import User

RATING_MIN = 1
RATING_MAX = 10


class Review(CreatedAtMixin, Base):
    """User review of a movie.

    Attributes:
        review_id: Primary key.
        movie_id: Reviewed movie.
        user_id: Author.
        rating: Score between 1 and 10 inclusive.
        review_text: Optional free text.
    """

    __tablename__ = "reviews"
    __table_args__ = (
        CheckConstraint(
            f"rating >= {RATING_MIN} AND rating <= {RATING_MAX}",
            name="ck_reviews_rating_range",
        ),
    )

    review_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    movie_id: Mapped[int] = mapped_column(ForeignKey("movies.movie_id"), nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.user_id"), nullable=False, index=True)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    review_text: Mapped[str | None] = mapped_column(Text)

    movie: Mapped["Movie"] = relationship("Movie", back_populates="reviews")
    user: Mapped["User"] = relationship("User", back_populates="reviews")

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<Review(review_id={self.review_id}, movie_id={self.movie_id}, "
            f"user_id={self.user_id}, rating={self.rating})>"
        )
