"""Case-insensitive substring filtering over the catalog."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ...domain.models.item import IconItem


def normalise_query(query: Optional[str]) -> str:
    return (query or "").strip().lower()


def matches_query(item: IconItem, needle: str) -> bool:
    """Return ``True`` when *needle* (already lower-cased) occurs in the item."""

    return needle in item.display_text.lower() or needle in item.id.lower()


class SearchFilter:
    """Derive the filtered subset of a catalog from a text query.

    Matching is plain containment against the display text or the raw id, and
    the catalog's relative order is kept.  No ranking is applied.
    """

    def __init__(self) -> None:
        self._query: str = ""

    @property
    def query(self) -> str:
        return self._query

    def apply(self, items: Sequence[IconItem], query: Optional[str]) -> List[IconItem]:
        needle = normalise_query(query)
        self._query = needle
        if not needle:
            return list(items)
        return [item for item in items if matches_query(item, needle)]
