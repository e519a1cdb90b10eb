"""Pure-Python page slicer for the filtered item sequence.

Pages are materialised on demand and appended to ``displayed_items``, which
therefore always equals ``filtered_items[:current_page * page_size]``
(clamped to the filtered length).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from ...config import DEFAULT_PAGE_SIZE
from ...domain.models.item import IconItem

LOGGER = logging.getLogger(__name__)


@dataclass
class PageResult:
    """Result of loading a single page."""

    items: List[IconItem] = field(default_factory=list)
    page: int = 0
    page_size: int = DEFAULT_PAGE_SIZE
    total_count: int = 0

    @property
    def has_more(self) -> bool:
        return self.page * self.page_size < self.total_count

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0 or self.total_count <= 0:
            return 0
        return (self.total_count + self.page_size - 1) // self.page_size


class PageLoader:
    """Stateful page cursor over a filtered item list.

    :meth:`reset` installs a new filtered sequence and rewinds to page 0;
    :meth:`next_page` appends the following slice.  The filtered list itself is
    never modified.
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self._page_size = page_size

        # State
        self._filtered: List[IconItem] = []
        self._displayed: List[IconItem] = []
        self._current_page: int = 0

    # -- properties --------------------------------------------------------

    @property
    def filtered_items(self) -> Sequence[IconItem]:
        return self._filtered

    @property
    def displayed_items(self) -> Sequence[IconItem]:
        return self._displayed

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_count(self) -> int:
        return len(self._filtered)

    @property
    def total_pages(self) -> int:
        if self.total_count <= 0:
            return 0
        return (self.total_count + self._page_size - 1) // self._page_size

    # -- public API --------------------------------------------------------

    def reset(self, filtered_items: Sequence[IconItem]) -> None:
        """Replace the filtered sequence and discard every displayed page."""
        self._filtered = list(filtered_items)
        self._displayed = []
        self._current_page = 0

    def has_more(self) -> bool:
        return self._current_page * self._page_size < len(self._filtered)

    def next_page(self) -> List[IconItem]:
        """Slice the next page, append it to the displayed items and return it.

        Past the end the slice is empty but the page counter still advances,
        so repeated calls stay cheap and never fail.
        """
        return self.load_next_page().items

    def load_next_page(self) -> PageResult:
        start = self._current_page * self._page_size
        end = start + self._page_size
        items = self._filtered[start:end]

        self._displayed.extend(items)
        self._current_page += 1
        LOGGER.debug(
            "Page %d materialised: %d items (%d/%d displayed)",
            self._current_page,
            len(items),
            len(self._displayed),
            len(self._filtered),
        )
        return PageResult(
            items=items,
            page=self._current_page,
            page_size=self._page_size,
            total_count=len(self._filtered),
        )

    def rollback(self, result: PageResult) -> None:
        """Undo *result*, which must be the most recently loaded page."""
        if result.page != self._current_page:
            raise ValueError(
                f"Can only roll back page {self._current_page}, got page {result.page}"
            )
        if result.items:
            del self._displayed[-len(result.items):]
        self._current_page -= 1
        LOGGER.debug("Page %d rolled back", result.page)
