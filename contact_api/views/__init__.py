"""Pydantic schemas used as views in the MVC architecture."""

from .admin import (
    AdminLoginRequest,
    AdminLoginResponse,
    AdminPublic,
    AdminRegisterRequest,
)
from .common import EmailAddress, ErrorResponse, SuccessResponse
from .contact import ContactCreateRequest, ContactListResponse, ContactRead

__all__ = [
    "AdminRegisterRequest",
    "AdminLoginRequest",
    "AdminPublic",
    "AdminLoginResponse",
    "ContactCreateRequest",
    "ContactRead",
    "ContactListResponse",
    "EmailAddress",
    "ErrorResponse",
    "SuccessResponse",
]
