"""Movie repository for catalog queries."""

from sqlalchemy import Row, func, select
from sqlalchemy.orm import Session

from src.database.models import Genre, Movie, MovieGenre
from src.database.repositories.base import BaseRepository


class MovieRepository(BaseRepository[Movie]):
    """Repository for Movie entity operations."""

    model = Movie

    def __init__(self, session: Session) -> None:
        """Initialize movie repository.

        Args:
            session: SQLAlchemy session instance.
        """
        super().__init__(session)

    def get_with_genres(self, movie_id: int) -> Row[tuple[Movie, str | None]] | None:
        """Retrieve a movie with its genre names joined by commas.

        Movies without genres still match, with ``genres`` set to None.

        Args:
            movie_id: Movie primary key.

        Returns:
            Row of (Movie, genres) or None if the movie does not exist.
        """
        stmt = (
            select(Movie, func.group_concat(Genre.name).label("genres"))
            .outerjoin(MovieGenre, Movie.movie_id == MovieGenre.movie_id)
            .outerjoin(Genre, MovieGenre.genre_id == Genre.genre_id)
            .where(Movie.movie_id == movie_id)
            .group_by(Movie.movie_id)
        )
        return self._session.execute(stmt).first()

    def search_by_title(self, title: str) -> list[Movie]:
        """Find movies whose title contains a substring, ignoring case.

        Args:
            title: Substring to look for (LIKE wildcards are not escaped).

        Returns:
            Matching movies ordered by id.
        """
        stmt = (
            select(Movie)
            .where(Movie.title.ilike(f"%{title}%"))
            .order_by(Movie.movie_id)
        )
        return list(self._session.scalars(stmt).all())

    def get_by_genre(self, genre_id: int) -> list[Movie]:
        """List movies tagged with a genre.

        Args:
            genre_id: Genre primary key.

        Returns:
            Movies linked to the genre, ordered by id.
        """
        stmt = (
            select(Movie)
            .join(MovieGenre, Movie.movie_id == MovieGenre.movie_id)
            .where(MovieGenre.genre_id == genre_id)
            .order_by(Movie.movie_id)
        )
        return list(self._session.scalars(stmt).all())
