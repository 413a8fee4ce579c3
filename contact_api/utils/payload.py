"""Helpers for shaping request payloads before persistence."""

from __future__ import annotations

from typing import Any, Mapping


def clean_payload(data: Mapping[str, Any]) -> dict[str, Any]:
    """Drop entries whose value is None or an empty string."""

    return {
        key: value
        for key, value in data.items()
        if value is not None and value != ""
    }


__all__ = ["clean_payload"]
