"""MySQL connection pool management with SQLAlchemy 2.0.

The engine (and its pool) is built once at application startup and
handed to request handlers, never looked up from a module global.
"""

from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool

from src.settings import settings
from src.settings.database import DatabaseSettings


def create_db_engine(db_settings: DatabaseSettings | None = None) -> Engine:
    """Create the synchronous SQLAlchemy engine with connection pooling.

    Args:
        db_settings: Database settings. Defaults to the global settings.

    Returns:
        SQLAlchemy Engine configured with QueuePool.
    """
    db = db_settings or settings.database
    return create_engine(
        db.sync_url,
        poolclass=QueuePool,
        pool_size=db.pool_size,
        max_overflow=db.pool_overflow,
        pool_timeout=db.pool_timeout,
        pool_pre_ping=True,
        connect_args=db.connect_args,
        echo=settings.debug,
    )


class Database:
    """Owns the engine and session factory shared by every request.

    Attributes:
        _engine: SQLAlchemy engine holding the connection pool.
        _session_factory: Session factory bound to the engine.

    Example:
        ```python
        database = Database(create_db_engine())
        with database.session() as session:
            session.execute(text("SELECT 1"))
        ```
    """

    def __init__(self, engine: Engine) -> None:
        """Bind the database to an engine.

        Args:
            engine: Engine whose pool serves all sessions.
        """
        self._engine = engine
        self._session_factory = sessionmaker(
            bind=engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Provide a session scope that always returns its connection.

        Commits on success, rolls back on exception, and closes the
        session when done.

        Yields:
            SQLAlchemy Session instance.
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def check_connection(self) -> bool:
        """Test database connectivity with a simple query.

        Returns:
            True if connection successful, False otherwise.
        """
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    @property
    def pool_available(self) -> int | None:
        """Number of idle connections in the pool, when the pool reports it."""
        pool = self._engine.pool
        return pool.checkedin() if hasattr(pool, "checkedin") else None

    def dispose(self) -> None:
        """Dispose the connection pool and release resources.

        Should be called during application shutdown.
        """
        self._engine.dispose()

    @property
    def engine(self) -> Engine:
        """Get the underlying engine."""
        return self._engine
