"""Identifier helpers for UUID-keyed records."""
from __future__ import annotations

from typing import Any
from uuid import UUID


def canonical_uuid(value: str) -> str | None:
    """Return the lowercase hyphenated form of ``value``, or ``None`` if it is not a UUID."""

    try:
        return str(UUID(value))
    except ValueError:
        return None


def uuid_to_str(value: Any) -> Any:
    """Drivers with a native uuid type hand back ``UUID`` objects; APIs expose strings."""

    if isinstance(value, UUID):
        return str(value)
    return value
