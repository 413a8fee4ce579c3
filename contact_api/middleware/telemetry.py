"""Telemetry middleware for request instrumentation."""

from __future__ import annotations

import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from contact_api.telemetry import observe_request

# Label for requests no route matched; raw paths would mint a series per URL.
UNMATCHED_ROUTE = "unmatched"


def route_label(request: Request) -> str:
    """Return the matched route template, or a fixed label when nothing matched."""

    route = request.scope.get("route")
    template = getattr(route, "path", None) if route is not None else None
    return template or UNMATCHED_ROUTE


class TelemetryMiddleware(BaseHTTPMiddleware):
    """Record request counts and latency per route template."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            # The router fills scope["route"] during call_next, so resolve afterwards.
            observe_request(
                request.method,
                route_label(request),
                status_code,
                time.perf_counter() - started,
            )
