"""User repository exposing only public account columns."""

from sqlalchemy import RowMapping, select
from sqlalchemy.orm import Session

from src.database.models import User
from src.database.repositories.base import BaseRepository

# Credential columns (password_hash) are deliberately absent.
PUBLIC_COLUMNS = (
    User.user_id,
    User.username,
    User.email,
    User.is_active,
    User.created_at,
)


class UserRepository(BaseRepository[User]):
    """Repository for User entity operations.

    Lookups select an explicit column list instead of the mapped entity,
    so credential columns never leave the store.
    """

    model = User

    def __init__(self, session: Session) -> None:
        """Initialize user repository.

        Args:
            session: SQLAlchemy session instance.
        """
        super().__init__(session)

    def get_all_public(self) -> list[RowMapping]:
        """List every user without credential columns.

        Returns:
            Row mappings keyed by column name.
        """
        stmt = select(*PUBLIC_COLUMNS).order_by(User.user_id)
        return list(self._session.execute(stmt).mappings().all())

    def get_public_by_id(self, user_id: int) -> RowMapping | None:
        """Retrieve one user without credential columns.

        Args:
            user_id: User primary key.

        Returns:
            Row mapping or None if not found.
        """
        stmt = select(*PUBLIC_COLUMNS).where(User.user_id == user_id)
        return self._session.execute(stmt).mappings().first()
