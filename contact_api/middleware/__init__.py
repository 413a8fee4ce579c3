"""Application middleware package."""

from .logging import StructuredLoggingMiddleware
from .telemetry import UNMATCHED_ROUTE, TelemetryMiddleware, route_label

__all__ = [
    "StructuredLoggingMiddleware",
    "TelemetryMiddleware",
    "UNMATCHED_ROUTE",
    "route_label",
]
