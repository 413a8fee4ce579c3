"""Translate schema violations into a single human-readable message."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from contact_api.services.errors import ValidationError

_OBJECT_TYPES = {"dict_type", "model_type", "model_attributes_type"}


def _field_label(loc: Sequence[Any]) -> str:
    """Return the offending field name, skipping the request location prefix."""

    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    if not parts:
        return "value"
    return parts[-1]


def describe_error(error: Mapping[str, Any]) -> str:
    """Render one pydantic error entry in the quoted-field message style."""

    error_type = error.get("type", "")
    field = f'"{_field_label(error.get("loc", ()))}"'
    ctx = error.get("ctx") or {}

    if error_type == "json_invalid":
        return "Invalid JSON payload"
    if error_type == "missing":
        return f"{field} is required"
    if error_type in _OBJECT_TYPES:
        return f"{field} must be of type object"
    if error_type == "extra_forbidden":
        return f"{field} is not allowed"
    if error.get("input") == "":
        return f"{field} is not allowed to be empty"
    if error_type == "string_type":
        return f"{field} must be a string"
    if error_type == "string_too_short":
        return f"{field} length must be at least {ctx.get('min_length')} characters long"
    if error_type == "value_error" and "email" in str(error.get("msg", "")):
        return f"{field} must be a valid email"

    return f"{field} {error.get('msg', 'is invalid')}"


def first_violation(errors: Sequence[Mapping[str, Any]]) -> ValidationError:
    """Build a ValidationError describing the first violated constraint."""

    if not errors:
        return ValidationError("Invalid request payload")
    return ValidationError(describe_error(errors[0]))


__all__ = ["describe_error", "first_violation"]
