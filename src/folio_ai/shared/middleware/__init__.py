"""Request-context middleware — request ID, provider context, access log, metrics."""

from __future__ import annotations

import time
import uuid
from collections.abc import Callable, Awaitable

import structlog
from starlette.requests import Request
from starlette.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware

from folio_ai.domain.enums import NO_PROVIDER
from folio_ai.shared.observability.metrics import HTTP_REQUEST_DURATION, HTTP_REQUESTS_TOTAL

logger = structlog.get_logger(__name__)

UNMATCHED_ENDPOINT = "unmatched"


def route_template(request: Request) -> str:
    """Path template of the route serving ``request``, for bounded metric labels."""
    for route in request.app.routes:
        path_regex = getattr(route, "path_regex", None)
        if path_regex is not None and path_regex.match(request.url.path):
            return route.path
    return UNMATCHED_ENDPOINT


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds request and provider context for the lifetime of one HTTP request.

    Every log line emitted while the request is served carries ``request_id``
    and the provider that was primary when the request arrived.  The access
    log reports the primary afterwards too, so a failover is visible per
    request.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        client = getattr(request.app.state, "fallback_client", None)
        primary = client.current_primary() if client is not None else NO_PROVIDER
        endpoint = route_template(request)

        structlog.contextvars.bind_contextvars(request_id=request_id, primary=primary)
        start = time.monotonic()
        try:
            response = await call_next(request)
            duration = time.monotonic() - start

            HTTP_REQUESTS_TOTAL.labels(
                method=request.method,
                endpoint=endpoint,
                status_code=response.status_code,
            ).inc()
            HTTP_REQUEST_DURATION.labels(method=request.method, endpoint=endpoint).observe(duration)

            logger.info(
                "http_request",
                method=request.method,
                endpoint=endpoint,
                status=response.status_code,
                duration_ms=round(duration * 1000, 2),
                primary_after=client.current_primary() if client is not None else NO_PROVIDER,
            )
        finally:
            structlog.contextvars.unbind_contextvars("request_id", "primary")

        response.headers["X-Request-ID"] = request_id
        return response
