"""Shared pytest fixtures.

Builds an in-memory SQLite store with the production schema, seeds it
with a small catalog, and wires it into the app through ``create_app``.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, Generator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from src.database.models import Base, Genre, Movie, MovieGenre, Review, User

# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------

MOVIES = [
    ("The Shawshank Redemption", 1994, 142, "Two imprisoned men bond over years.", 9.3),
    ("The Godfather", 1972, 175, "The aging patriarch of a crime dynasty.", 9.2),
    ("The Dark Knight", 2008, 152, "Batman faces the Joker.", 9.0),
    ("Pulp Fiction", 1994, 154, "Intertwined tales of LA criminals.", 8.9),
    ("Forrest Gump", 1994, 142, "A slow-witted man witnesses history.", 8.8),
    ("Inception", 2010, 148, "A thief steals secrets through dreams.", 8.8),
    ("Fight Club", 1999, 139, "An insomniac starts an underground club.", 8.8),
    ("The Matrix", 1999, 136, "A hacker learns reality is simulated.", 8.7),
    ("Goodfellas", 1990, 146, "The rise and fall of a mob associate.", 8.7),
    ("Se7en", 1995, 127, "Detectives hunt a serial killer.", 8.6),
    ("Alien", 1979, 117, "A crew meets a deadly lifeform.", 8.5),
    ("Interstellar", 2014, 169, "Explorers travel through a wormhole.", 8.7),
]

GENRES = [
    ("Drama", "Character-driven stories"),
    ("Crime", "Criminals and investigations"),
    ("Action", "Physical feats and chases"),
    ("Horror", "Films intended to frighten"),
]

# (movie_id, genre_id)
MOVIE_GENRES = [(1, 1), (2, 1), (2, 2), (3, 3), (3, 2), (4, 2)]

USERS = [
    ("alice", "alice@example.com", True),
    ("bob", "bob@example.com", False),
]

# (movie_id, user_id, rating, review_text)
REVIEWS = [
    (1, 1, 10, "A masterpiece."),
    (2, 1, 9, "An offer I could not refuse."),
    (1, 2, 8, None),
]

PASSWORD_HASH = "pbkdf2:sha256:not-a-real-hash"


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_env_for_tests(monkeypatch: pytest.MonkeyPatch) -> None:
    """Mock env variables for reproducible tests."""
    monkeypatch.setenv("SQL_HOSTNAME", "localhost")
    monkeypatch.setenv("SQL_PORT", "3306")
    monkeypatch.setenv("SQL_USERNAME", "test_user")
    monkeypatch.setenv("SQL_PASSWORD", "test_password")
    monkeypatch.setenv("SQL_DBNAME", "test_movies")
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.setenv("LOG_LEVEL", "INFO")


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


def make_engine() -> Engine:
    """In-memory SQLite engine shared across threads."""
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


def seed(engine: Engine) -> None:
    """Insert the sample catalog."""
    with Session(engine) as session:
        session.add_all(
            Movie(
                title=title,
                release_year=year,
                duration_minutes=duration,
                plot_summary=plot,
                rating=rating,
            )
            for title, year, duration, plot, rating in MOVIES
        )
        session.add_all(Genre(name=name, description=desc) for name, desc in GENRES)
        session.add_all(
            User(username=name, email=email, password_hash=PASSWORD_HASH, is_active=active)
            for name, email, active in USERS
        )
        session.flush()
        session.add_all(MovieGenre(movie_id=m, genre_id=g) for m, g in MOVIE_GENRES)
        session.add_all(
            Review(movie_id=m, user_id=u, rating=r, review_text=text)
            for m, u, r, text in REVIEWS
        )
        session.commit()


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Seeded in-memory store."""
    engine = make_engine()
    Base.metadata.create_all(engine)
    seed(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine: Engine) -> Generator[Session, None, None]:
    """Session on the seeded store."""
    with Session(engine) as session:
        yield session


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------


async def _client_for(engine: Engine) -> AsyncGenerator[AsyncClient, None]:
    from src.api.main import create_app

    app = create_app(engine=engine)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def client(engine: Engine) -> AsyncGenerator[AsyncClient, None]:
    """``httpx.AsyncClient`` wired to an app backed by the seeded store."""
    async for c in _client_for(engine):
        yield c


@pytest.fixture
async def broken_client() -> AsyncGenerator[AsyncClient, None]:
    """Client whose store has no tables, so every query fails."""
    engine = make_engine()
    async for c in _client_for(engine):
        yield c
    engine.dispose()
