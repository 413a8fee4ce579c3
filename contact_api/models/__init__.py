"""SQLAlchemy models backing the admin and contact tables."""

from .base import Base
from .admin import AdminAccount  # noqa: F401
from .contact import ContactMessage  # noqa: F401

__all__ = [
    "Base",
    "AdminAccount",
    "ContactMessage",
]
