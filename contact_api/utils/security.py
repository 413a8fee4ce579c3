"""Password hashing helpers built on bcrypt."""

from __future__ import annotations

import bcrypt

from contact_api.config.settings import settings

# bcrypt only consumes the first 72 bytes of a secret.
_BCRYPT_MAX_BYTES = 72


def _encode_secret(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int | None = None) -> str:
    """Return a salted bcrypt hash for the supplied password."""

    cost = rounds if rounds is not None else settings.security.bcrypt_rounds
    salt = bcrypt.gensalt(rounds=cost)
    return bcrypt.hashpw(_encode_secret(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check whether the provided password matches the stored hash."""

    try:
        return bcrypt.checkpw(_encode_secret(password), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


__all__ = [
    "hash_password",
    "verify_password",
]
