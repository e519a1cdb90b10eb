"""Authoritative, immutable set of items for one picker invocation."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Sequence

from ...domain.models.item import IconItem
from ...errors import CatalogValidationError

LOGGER = logging.getLogger(__name__)


class ItemCatalog:
    """Normalise raw file names into :class:`IconItem` values.

    Input order is preserved exactly and duplicates are kept, so the list the
    user scrolls through always mirrors the enumeration it was built from.
    """

    def __init__(self) -> None:
        self._base_path: str = ""
        self._items: tuple[IconItem, ...] = ()

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def items(self) -> Sequence[IconItem]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def initialize(self, base_path: str | os.PathLike[str], names: Iterable[str]) -> Sequence[IconItem]:
        """Build the catalog from *names* located under *base_path*."""

        try:
            base = os.fspath(base_path)
        except TypeError as exc:
            raise CatalogValidationError(f"Invalid base path: {base_path!r}") from exc
        if not isinstance(base, str):
            raise CatalogValidationError(f"Base path must be text, got {base_path!r}")
        if isinstance(names, (str, bytes)):
            raise CatalogValidationError("Expected a sequence of names, got a single string")
        try:
            raw_names = list(names)
        except TypeError as exc:
            raise CatalogValidationError(f"Names are not iterable: {names!r}") from exc

        items = []
        for index, name in enumerate(raw_names):
            if not isinstance(name, str):
                raise CatalogValidationError(
                    f"Entry {index} is not a string: {name!r}"
                )
            items.append(IconItem.from_name(base, name))

        self._base_path = base
        self._items = tuple(items)
        LOGGER.info("Catalog initialised with %d items from %s", len(items), base)
        return self._items
