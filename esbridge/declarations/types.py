"""Host type names to TypeScript type names."""

from __future__ import annotations

from .constants import TYPE_NAME_MAP


def map_type(name: str) -> str:
    """Map a host type name; unknown names (classes, enums) pass through."""
    if not name:
        return "void"
    return TYPE_NAME_MAP.get(name, name)


__all__ = ["map_type"]
