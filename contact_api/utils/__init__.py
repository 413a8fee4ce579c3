"""Utility helpers for the contact & admin backend."""

from .payload import clean_payload
from .security import hash_password, verify_password

__all__ = [
    "clean_payload",
    "hash_password",
    "verify_password",
]
