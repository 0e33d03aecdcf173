"""Initialize the movie database schema.

Creates all tables defined in SQLAlchemy models and optionally seeds
the genre reference data.

Usage:
    python -m src.scripts.init_database
    python -m src.scripts.init_database --drop  # Drop and recreate
    python -m src.scripts.init_database --seed  # Include seed genres
    python -m src.scripts.init_database --check # Only list tables
"""

import argparse
import sys

from sqlalchemy import inspect, select

from src.database.connection import Database, create_db_engine
from src.database.models import Base, Genre
from src.settings import settings
from src.utils.logger import setup_logger

logger = setup_logger("scripts.init_database")

SEED_GENRES = [
    ("Action", "Fast-paced films built around physical feats"),
    ("Comedy", "Films intended to make the audience laugh"),
    ("Drama", "Character-driven serious narratives"),
    ("Horror", "Films intended to frighten"),
    ("Science Fiction", "Speculative stories about science and technology"),
    ("Thriller", "Suspense-driven plots"),
    ("Romance", "Stories centred on a love relationship"),
    ("Animation", "Animated feature films"),
    ("Documentary", "Non-fiction films"),
    ("Crime", "Stories about criminals or investigations"),
]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse, defaults to ``sys.argv[1:]``.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        description="Initialize the movie database schema",
    )
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Drop existing tables before creating",
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Seed genre reference data after creation",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only check connection, don't modify schema",
    )
    return parser.parse_args(argv)


def drop_tables(db: Database) -> None:
    """Drop all tables in the schema."""
    logger.info("Dropping existing tables...")
    Base.metadata.drop_all(bind=db.engine)


def create_tables(db: Database) -> None:
    """Create all tables from SQLAlchemy models."""
    logger.info("Creating tables...")
    Base.metadata.create_all(bind=db.engine)


def seed_genres(db: Database) -> int:
    """Insert the default genres that are not present yet.

    Args:
        db: Database instance.

    Returns:
        Number of genres inserted.
    """
    with db.session() as session:
        existing = set(session.scalars(select(Genre.name)).all())
        missing = [
            Genre(name=name, description=description)
            for name, description in SEED_GENRES
            if name not in existing
        ]
        session.add_all(missing)

    logger.info("Seeded %d genres", len(missing))
    return len(missing)


def list_tables(db: Database) -> list[str]:
    """Return the table names present in the database."""
    return sorted(inspect(db.engine).get_table_names())


def run(db: Database, args: argparse.Namespace) -> int:
    """Perform the database operations selected by the arguments.

    Args:
        db: Database instance.
        args: Parsed command line arguments.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    if not db.check_connection():
        logger.error("Cannot connect to database %s", settings.database.database)
        return 1

    if not args.check:
        if args.drop:
            drop_tables(db)
        create_tables(db)
        if args.seed:
            seed_genres(db)

    tables = list_tables(db)
    logger.info("Tables (%d): %s", len(tables), ", ".join(tables))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = parse_args(argv)
    logger.info(
        "Initializing database %s on %s:%s",
        settings.database.database,
        settings.database.host,
        settings.database.port,
    )
    db = Database(create_db_engine())
    try:
        return run(db, args)
    finally:
        db.dispose()


if __name__ == "__main__":
    sys.exit(main())
