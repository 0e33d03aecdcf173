"""Tests for the database initialization script."""

from sqlalchemy import create_engine, inspect, select
from sqlalchemy.pool import StaticPool

from src.database.connection import Database
from src.database.models import Genre
from src.scripts.init_database import SEED_GENRES, parse_args, run, seed_genres


def _database() -> Database:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    return Database(engine)


class TestParseArgs:
    @staticmethod
    def test_defaults() -> None:
        args = parse_args([])
        assert (args.drop, args.seed, args.check) == (False, False, False)

    @staticmethod
    def test_flags() -> None:
        args = parse_args(["--drop", "--seed"])
        assert args.drop is True
        assert args.seed is True


class TestRun:
    @staticmethod
    def test_creates_schema() -> None:
        db = _database()
        assert run(db, parse_args([])) == 0

        tables = set(inspect(db.engine).get_table_names())
        assert {"movies", "genres", "movie_genres", "users", "reviews"} <= tables
        db.dispose()

    @staticmethod
    def test_check_does_not_create() -> None:
        db = _database()
        assert run(db, parse_args(["--check"])) == 0
        assert inspect(db.engine).get_table_names() == []
        db.dispose()

    @staticmethod
    def test_drop_recreates_empty_tables() -> None:
        db = _database()
        run(db, parse_args(["--seed"]))
        assert run(db, parse_args(["--drop"])) == 0

        with db.session() as session:
            assert session.scalars(select(Genre)).all() == []
        db.dispose()

    @staticmethod
    def test_seed_is_idempotent() -> None:
        db = _database()
        assert run(db, parse_args(["--seed"])) == 0
        assert seed_genres(db) == 0

        with db.session() as session:
            names = session.scalars(select(Genre.name)).all()
        assert len(names) == len(SEED_GENRES)
        db.dispose()
