"""Service layer implementing the admin and contact resources."""

from .admins import ADMIN_EXISTS_MESSAGE, AdminService
from .contacts import ContactService
from .errors import (
    AuthenticationError,
    ConflictError,
    ServiceError,
    StoreError,
    ValidationError,
)
from .validation import describe_error, first_violation

__all__ = [
    "AdminService",
    "ADMIN_EXISTS_MESSAGE",
    "ContactService",
    "ServiceError",
    "ValidationError",
    "AuthenticationError",
    "ConflictError",
    "StoreError",
    "describe_error",
    "first_violation",
]
