"""Review repository with reviewer and movie lookups."""

from sqlalchemy import RowMapping, select
from sqlalchemy.orm import Session

from src.database.models import Movie, Review, User
from src.database.repositories.base import BaseRepository

REVIEW_COLUMNS = (
    Review.review_id,
    Review.movie_id,
    Review.user_id,
    Review.rating,
    Review.review_text,
    Review.created_at,
)


class ReviewRepository(BaseRepository[Review]):
    """Repository for Review entity operations.

    Listing queries join the reviewer's username and/or the movie title
    onto each review row.
    """

    model = Review

    def __init__(self, session: Session) -> None:
        """Initialize review repository.

        Args:
            session: SQLAlchemy session instance.
        """
        super().__init__(session)

    def get_all_detailed(self) -> list[RowMapping]:
        """List all reviews with username and movie title.

        Returns:
            Row mappings with review columns plus ``username`` and ``movie_title``.
        """
        stmt = (
            select(*REVIEW_COLUMNS, User.username, Movie.title.label("movie_title"))
            .join(User, Review.user_id == User.user_id)
            .join(Movie, Review.movie_id == Movie.movie_id)
            .order_by(Review.review_id)
        )
        return list(self._session.execute(stmt).mappings().all())

    def get_by_movie(self, movie_id: int) -> list[RowMapping]:
        """List reviews of one movie with the reviewer's username.

        Args:
            movie_id: Movie primary key.

        Returns:
            Row mappings with review columns plus ``username``.
        """
        stmt = (
            select(*REVIEW_COLUMNS, User.username)
            .join(User, Review.user_id == User.user_id)
            .where(Review.movie_id == movie_id)
            .order_by(Review.review_id)
        )
        return list(self._session.execute(stmt).mappings().all())

    def get_by_user(self, user_id: int) -> list[RowMapping]:
        """List reviews written by one user with the movie title.

        Args:
            user_id: User primary key.

        Returns:
            Row mappings with review columns plus ``movie_title``.
        """
        stmt = (
            select(*REVIEW_COLUMNS, Movie.title.label("movie_title"))
            .join(Movie, Review.movie_id == Movie.movie_id)
            .where(Review.user_id == user_id)
            .order_by(Review.review_id)
        )
        return list(self._session.execute(stmt).mappings().all())
