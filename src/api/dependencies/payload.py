"""Request body parsing for JSON and URL-encoded form submissions.

Both encodings are validated against the same pydantic body model,
after the configured body size limit has been checked.
"""

import json
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.api.errors import PayloadTooLargeError, ValidationError, format_validation_errors
from src.settings import settings

PayloadT = TypeVar("PayloadT", bound=BaseModel)

_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_payload(request: Request) -> dict[str, Any]:
    """Read the request body as a flat dict.

    Args:
        request: Incoming HTTP request.

    Returns:
        Field names mapped to raw values. Empty dict for an empty body.

    Raises:
        PayloadTooLargeError: Body larger than ``API_MAX_BODY_SIZE``.
        ValidationError: Body is not a JSON object.
    """
    limit = settings.api.max_body_size
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise PayloadTooLargeError(f"Request body exceeds {limit} bytes")

    body = await _read_body(request, limit)

    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_CONTENT_TYPES):
        form = await _replay(request, body).form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    if not body.strip():
        return {}

    try:
        data = json.loads(body)
    except ValueError as e:
        raise ValidationError(f"Malformed JSON body: {e}") from e
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


async def _read_body(request: Request, limit: int) -> bytes:
    """Collect the body, failing as soon as it grows past ``limit`` bytes."""
    chunks: list[bytes] = []
    size = 0
    async for chunk in request.stream():
        size += len(chunk)
        if size > limit:
            raise PayloadTooLargeError(f"Request body exceeds {limit} bytes")
        chunks.append(chunk)
    return b"".join(chunks)


def _replay(request: Request, body: bytes) -> Request:
    """Request over the same scope whose body is the bytes already read."""

    async def receive() -> dict[str, Any]:
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(request.scope, receive)


def body_of(model: type[PayloadT]) -> Callable[[Request], Awaitable[PayloadT]]:
    """Build a dependency parsing the body into ``model``.

    Args:
        model: Pydantic model describing the body.

    Returns:
        Async dependency returning a validated ``model`` instance.

    Example:
        @router.post("")
        def create(payload: Annotated[MoviePayload, Depends(body_of(MoviePayload))]):
            ...
    """

    async def dependency(request: Request) -> PayloadT:
        data = await read_payload(request)
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(format_validation_errors(e.errors())) from e

    return dependency
