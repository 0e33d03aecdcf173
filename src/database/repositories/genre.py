"""Genre repository for reference data operations."""

from sqlalchemy.orm import Session

from src.database.models import Genre
from src.database.repositories.base import BaseRepository


class GenreRepository(BaseRepository[Genre]):
    """Repository for Genre entity operations.

    Genres are reference data; the generic CRUD covers everything
    the API needs.
    """

    model = Genre

    def __init__(self, session: Session) -> None:
        """Initialize genre repository.

        Args:
            session: SQLAlchemy session instance.
        """
        super().__init__(session)
