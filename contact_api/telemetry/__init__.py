"""Telemetry helpers and metrics."""

from .metrics import (
    CONTACT_COUNTER,
    ERROR_COUNTER,
    LOGIN_COUNTER,
    REGISTRATION_COUNTER,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    increment_contact_submission,
    increment_login,
    increment_registration,
    observe_request,
)

__all__ = [
    "CONTACT_COUNTER",
    "ERROR_COUNTER",
    "LOGIN_COUNTER",
    "REGISTRATION_COUNTER",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "increment_contact_submission",
    "increment_login",
    "increment_registration",
    "observe_request",
]
