# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
HTTP Middleware: request ID propagation and Prometheus metrics.
Metric labels use the route template (``/api/v1/requests/{request_id}/assign``)
so request and designer ids never become label values.
"""

import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from designflow.metrics.prometheus import REQUEST_COUNT, REQUEST_LATENCY, HTTP_ERRORS

UNMATCHED_ENDPOINT = "unmatched"

SKIP_PATHS: tuple[str, ...] = (
    "/health", "/health/ready", "/metrics", "/openapi.json", "/docs", "/redoc",
)


def route_template(request: Request) -> str:
    """Rebuild the matched route's path with ids swapped for their parameter names."""
    if request.scope.get("endpoint") is None:
        return UNMATCHED_ENDPOINT
    params = request.scope.get("path_params") or {}
    names_by_value = {str(value): name for name, value in params.items()}
    return "/".join(
        "{%s}" % names_by_value[segment] if segment in names_by_value else segment
        for segment in request.url.path.split("/")
    )


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Propagate or generate X-Request-ID for distributed tracing."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Track request count, latency, and error rate via Prometheus."""

    async def dispatch(self, request: Request, call_next):
        start = time.time()
        response = await call_next(request)
        duration = time.time() - start

        if request.url.path in SKIP_PATHS:
            return response

        # The router fills endpoint and path_params into the shared scope.
        endpoint = route_template(request)
        REQUEST_COUNT.labels(
            method=request.method,
            endpoint=endpoint,
            status=str(response.status_code),
        ).inc()
        REQUEST_LATENCY.labels(
            method=request.method,
            endpoint=endpoint,
        ).observe(duration)
        if response.status_code >= 400:
            HTTP_ERRORS.labels(
                method=request.method,
                endpoint=endpoint,
                status=str(response.status_code),
            ).inc()

        return response
