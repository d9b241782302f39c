"""Utility helpers shared by the portfolio document builders."""

from __future__ import annotations

import typing as typ


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _string_list(value: object | None) -> list[str]:
    """Coerce a list payload into strings, dropping ``None`` entries."""
    match value:
        case list() as items:
            return [str(item) for item in items if item is not None]
        case _:
            return []


def _mapping_entries(
    value: object | None,
) -> list[typ.Mapping[str, typ.Any]]:
    """Return the mapping entries of a list payload, skipping anything else."""
    match value:
        case list() as items:
            return [item for item in items if isinstance(item, dict)]
        case _:
            return []


__all__ = ["_mapping_entries", "_optional_str", "_string_list"]
