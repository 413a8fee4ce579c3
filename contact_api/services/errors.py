"""Exceptions raised by the resource services and mapped to HTTP responses."""

from __future__ import annotations

from typing import Optional


class ServiceError(RuntimeError):
    """Base error carrying the HTTP status and the client-facing message."""

    status_code = 500

    def __init__(self, message: str, error: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.error = error if error is not None else message


class ValidationError(ServiceError):
    """Raised when a request body violates its schema."""

    status_code = 400


class AuthenticationError(ServiceError):
    """Raised for any failed login; never reveals which credential was wrong."""

    status_code = 401

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class ConflictError(ServiceError):
    """Raised when a uniqueness rule would be violated."""

    status_code = 409


class StoreError(ServiceError):
    """Raised when the persistence layer fails; the store message is passed through."""

    status_code = 500

    def __init__(self, error: str) -> None:
        super().__init__("Server error", error)

    @classmethod
    def from_exception(cls, exc: Exception) -> StoreError:
        """Wrap a driver failure, keeping the driver message but not the SQL or parameters."""

        origin = getattr(exc, "orig", None)
        return cls(str(origin if origin is not None else exc))


__all__ = [
    "ServiceError",
    "ValidationError",
    "AuthenticationError",
    "ConflictError",
    "StoreError",
]
