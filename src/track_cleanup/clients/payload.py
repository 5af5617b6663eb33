"""Helpers for reading loosely typed JSON payloads."""

from typing import Any


def optional_str(value: Any) -> str | None:
    """Return ``value`` when it is a non-empty string, else None."""
    if isinstance(value, str) and value:
        return value
    return None
