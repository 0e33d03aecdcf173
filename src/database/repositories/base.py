"""
Base repository with generic CRUD operations.

Provides a reusable base class for all repositories with
common database operations. Every method issues a single statement.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.orm import InstrumentedAttribute, Session

from src.database.models.base import Base

# Generic type variable bound to Base model
ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic repository providing common CRUD operations.

    Attributes:
        model: SQLAlchemy model class.
        session: Database session.
    """

    model: type[ModelT]

    def __init__(self, session: Session) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy session instance.
        """
        self._session = session

    @property
    def session(self) -> Session:
        """Get the database session."""
        return self._session

    @property
    def primary_key(self) -> InstrumentedAttribute:
        """Primary key column of the model (e.g. ``Movie.movie_id``)."""
        column = self.model.__mapper__.primary_key[0]
        return getattr(self.model, column.key)

    def get_by_id(self, entity_id: int) -> ModelT | None:
        """Retrieve entity by primary key.

        Args:
            entity_id: Primary key value.

        Returns:
            Entity instance or None if not found.
        """
        return self._session.get(self.model, entity_id)

    def get_all(self, limit: int | None = None, offset: int = 0) -> list[ModelT]:
        """Retrieve entities ordered by primary key.

        Args:
            limit: Maximum number of results, None for all rows.
            offset: Number of results to skip.

        Returns:
            List of entity instances.
        """
        stmt = select(self.model).order_by(self.primary_key)
        if limit is not None:
            stmt = stmt.limit(limit).offset(offset)
        return list(self._session.scalars(stmt).all())

    def create(self, entity: ModelT) -> ModelT:
        """Insert a new entity and commit.

        Args:
            entity: Entity instance to persist.

        Returns:
            Persisted entity with generated ID.
        """
        self._session.add(entity)
        self._session.flush()
        self._session.commit()
        return entity

    def update_by_id(self, entity_id: int, values: dict[str, Any]) -> bool:
        """Overwrite columns of one row and commit.

        Args:
            entity_id: Primary key value.
            values: Column names mapped to their new values.

        Returns:
            True if a row matched, False if not found.
        """
        stmt = update(self.model).where(self.primary_key == entity_id).values(**values)
        result = self._session.execute(stmt)
        self._session.commit()
        return result.rowcount > 0

    def delete_by_id(self, entity_id: int) -> bool:
        """Delete entity by primary key and commit.

        Args:
            entity_id: Primary key value.

        Returns:
            True if entity was deleted, False if not found.
        """
        stmt = delete(self.model).where(self.primary_key == entity_id)
        result = self._session.execute(stmt)
        self._session.commit()
        return result.rowcount > 0
