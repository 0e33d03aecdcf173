"""Prometheus metrics and access-log middleware for FastAPI.

Exposes HTTP request metrics and a /metrics endpoint
for Prometheus scraping.
"""

import time

from fastapi import FastAPI
from prometheus_client import Counter, Histogram, make_asgi_app
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.utils.logger import setup_logger

logger = setup_logger("api.access")

# =============================================================================
# HTTP METRICS
# =============================================================================

HTTP_REQUESTS_TOTAL = Counter(
    "movie_api_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)

HTTP_REQUEST_DURATION = Histogram(
    "movie_api_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)


# =============================================================================
# MIDDLEWARE
# =============================================================================


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Records HTTP request metrics and logs one line per request.

    Paths are labelled by route template (``/api/movies/{movie_id}``)
    so ids do not explode label cardinality. Skips the /metrics endpoint.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Process request and record metrics.

        Args:
            request: Incoming HTTP request.
            call_next: Next middleware/handler in the chain.

        Returns:
            HTTP response from downstream handler.
        """
        if request.url.path.startswith("/metrics"):
            return await call_next(request)

        method = request.method
        start = time.perf_counter()

        response = await call_next(request)

        duration = time.perf_counter() - start
        path = _route_template(request)
        status = str(response.status_code)

        HTTP_REQUESTS_TOTAL.labels(method=method, path=path, status=status).inc()
        HTTP_REQUEST_DURATION.labels(method=method, path=path).observe(duration)
        logger.info(
            "%s %s -> %s (%.1f ms)",
            method,
            request.url.path,
            status,
            duration * 1000,
        )

        return response


def _route_template(request: Request) -> str:
    """Return the matched route path, or a fixed label for unmatched paths."""
    route = request.scope.get("route")
    return getattr(route, "path", "<unmatched>")


# =============================================================================
# MOUNT HELPER
# =============================================================================


def mount_metrics(app: FastAPI) -> None:
    """Mount the /metrics Prometheus endpoint on a FastAPI app.

    Args:
        app: FastAPI application instance.
    """
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)
