"""Deterministic ordering helpers for shaped resource lists."""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def collation_key(value: Any) -> tuple[str, str]:
    """Return a locale-insensitive sort key for ``value``.

    Accents are stripped and case is folded so ``"Ärger"`` sorts next to
    ``"arger"``; the raw text breaks ties so the order stays total.
    """

    text = value if isinstance(value, str) else ("" if value is None else str(value))
    normalized = unicodedata.normalize("NFKD", text)
    stripped = "".join(char for char in normalized if not unicodedata.combining(char))
    return stripped.casefold(), text


def _name_of(item: Any) -> Any:
    name = getattr(item, "name", None)
    if name is None and isinstance(item, dict):
        attributes = item.get("attributes")
        if isinstance(attributes, dict):
            name = attributes.get("name")
    return name


def sort_by_name(items: Iterable[T], *, name_of: Callable[[T], Any] = _name_of) -> list[T]:
    """Return ``items`` sorted ascending by name."""

    return sorted(items, key=lambda item: collation_key(name_of(item)))


def sort_by_published_at_desc(items: Iterable[T]) -> list[T]:
    """Return ``items`` newest first by ``published_at``; undated items go last."""

    def published_at(item: Any) -> str:
        attributes = getattr(item, "attributes", None)
        if attributes is None and isinstance(item, dict):
            attributes = item.get("attributes")
        value = attributes.get("published_at") if isinstance(attributes, dict) else None
        return value if isinstance(value, str) else ""

    materialized = list(items)
    dated = [item for item in materialized if published_at(item)]
    undated = [item for item in materialized if not published_at(item)]
    dated.sort(key=published_at, reverse=True)
    return dated + undated


__all__ = ["collation_key", "sort_by_name", "sort_by_published_at_desc"]
