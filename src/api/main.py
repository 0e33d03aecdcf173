"""FastAPI application entry point.

Creates and configures the Movie API: CORS, metrics, error envelopes
and the resource routers.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import Engine

from src.api.errors import register_exception_handlers
from src.api.responses import PrettyJSONResponse
from src.api.routers import genres, movies, reviews, system, users
from src.database.connection import Database, create_db_engine
from src.monitoring.middleware import PrometheusMiddleware, mount_metrics
from src.settings import get_masked_settings, settings
from src.utils.logger import setup_logger

logger = setup_logger("api.main")

# =============================================================================
# LIFESPAN
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Checks the database on startup and disposes the pool on shutdown.

    Args:
        app: FastAPI application instance.

    Yields:
        None after startup tasks complete.
    """
    database: Database = app.state.database
    logger.debug("Configuration: %s", get_masked_settings())
    await run_in_threadpool(_verify_database_connection, database)
    yield
    database.dispose()
    logger.info("Database connections closed")


def _verify_database_connection(database: Database) -> None:
    """Log whether the database is reachable on startup."""
    if database.check_connection():
        logger.info("Database connection established")
    else:
        logger.warning("Database unreachable at startup; requests will return 500")


# =============================================================================
# APPLICATION FACTORY
# =============================================================================


def create_app(engine: Engine | None = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        engine: Engine whose pool serves every request. Built from
            settings when omitted.

    Returns:
        Configured FastAPI instance.
    """
    app = FastAPI(
        title=settings.api.title,
        version=settings.api.version,
        description="REST API for movies, genres, users and reviews",
        lifespan=lifespan,
        default_response_class=PrettyJSONResponse,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    app.state.database = Database(engine if engine is not None else create_db_engine())
    _configure_cors(app)
    app.add_middleware(PrometheusMiddleware)
    mount_metrics(app)
    register_exception_handlers(app)
    _register_routers(app)
    return app


def _configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware.

    Args:
        app: FastAPI application instance.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _register_routers(app: FastAPI) -> None:
    """Register API routers.

    Args:
        app: FastAPI application instance.
    """
    app.include_router(system.router)
    app.include_router(movies.router)
    app.include_router(genres.router)
    app.include_router(users.router)
    app.include_router(reviews.router)


app = create_app()


# =============================================================================
# CLI ENTRY POINT
# =============================================================================


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    import uvicorn

    logger.info("App running on port %s. Control+C to exit.", settings.api.port)
    uvicorn.run(
        "src.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
    )


if __name__ == "__main__":
    run()
