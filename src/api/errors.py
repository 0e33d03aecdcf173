"""Error types and their JSON envelope handlers.

Every failure leaves the API as ``{"status": "error", "message": ...}``
with the status code carried by the exception.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.responses import PrettyJSONResponse
from src.api.schemas import ErrorResponse
from src.utils.logger import setup_logger

logger = setup_logger("api.errors")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class APIError(Exception):
    """Base class for errors surfaced to API clients.

    Attributes:
        status_code: HTTP status returned to the client.
        message: Human-readable description placed in the envelope.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(APIError):
    """Request rejected before reaching the store."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(APIError):
    """Single-resource lookup, update or delete matched no row."""

    status_code = status.HTTP_404_NOT_FOUND

    @classmethod
    def for_resource(cls, resource: str, resource_id: int | str) -> "NotFoundError":
        """Build the standard message, e.g. ``Movie with id 7 not found``."""
        return cls(f"{resource} with id {resource_id} not found")


class StoreError(APIError):
    """Any driver-level failure, passed through unclassified."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    @classmethod
    def from_exception(cls, exc: SQLAlchemyError) -> "StoreError":
        """Wrap a SQLAlchemy exception, keeping the driver's own message."""
        if isinstance(exc, DBAPIError) and exc.orig is not None:
            args = exc.orig.args
            # MySQL drivers carry (errno, message)
            if len(args) == 2 and isinstance(args[0], int):
                return cls(str(args[1]))
            return cls(str(exc.orig))
        return cls(str(exc))


class PayloadTooLargeError(APIError):
    """Request body over the configured size limit."""

    status_code = 413


# =============================================================================
# HANDLERS
# =============================================================================


def error_response(status_code: int, message: str) -> PrettyJSONResponse:
    """Build an error envelope response.

    Args:
        status_code: HTTP status code.
        message: Error description.

    Returns:
        JSON response with the error envelope.
    """
    return PrettyJSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


def format_validation_errors(errors: list[dict]) -> str:
    """Render pydantic error details as one line.

    Args:
        errors: Output of ``ValidationError.errors()``.

    Returns:
        Messages such as ``rating: Input should be a valid integer``.
    """
    parts = []
    for error in errors:
        location = ".".join(str(p) for p in error.get("loc", ()) if p not in ("body", "query", "path"))
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


async def _api_error_handler(_request: Request, exc: APIError) -> PrettyJSONResponse:
    return error_response(exc.status_code, exc.message)


async def _request_validation_handler(
    _request: Request,
    exc: RequestValidationError,
) -> PrettyJSONResponse:
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        format_validation_errors(list(exc.errors())),
    )


async def _store_error_handler(request: Request, exc: SQLAlchemyError) -> PrettyJSONResponse:
    error = StoreError.from_exception(exc)
    logger.error("Store error on %s %s: %s", request.method, request.url.path, error.message)
    return error_response(error.status_code, error.message)


async def _http_error_handler(
    _request: Request,
    exc: StarletteHTTPException,
) -> PrettyJSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _unhandled_error_handler(request: Request, exc: Exception) -> PrettyJSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach envelope handlers for every error kind.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(APIError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, _store_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
