"""Root and health endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.database import get_database
from src.api.schemas import (
    DatabaseComponentHealth,
    HealthComponents,
    HealthResponse,
    RootResponse,
)
from src.database.connection import Database
from src.settings import settings

router = APIRouter()


@router.get(
    "/",
    response_model=RootResponse,
    tags=["Root"],
    summary="API banner",
)
def root() -> RootResponse:
    """Identify the service."""
    return RootResponse(info="Movie API Backend")


@router.get(
    "/api/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Health check",
    description="Verify API is running and the store answers.",
)
def health_check(
    database: Annotated[Database, Depends(get_database)],
) -> HealthResponse:
    """Health check endpoint.

    Args:
        database: Shared database handle.

    Returns:
        ``healthy`` when the store answers, ``degraded`` otherwise.
    """
    db_health = _check_database(database)
    return HealthResponse(
        status="healthy" if db_health.connected else "degraded",
        version=settings.api.version,
        components=HealthComponents(database=db_health),
    )


def _check_database(database: Database) -> DatabaseComponentHealth:
    """Check database connection status."""
    if not database.check_connection():
        return DatabaseComponentHealth(connected=False)
    return DatabaseComponentHealth(connected=True, pool_available=database.pool_available)
