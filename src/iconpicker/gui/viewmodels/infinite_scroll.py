"""Scroll-position trigger for loading the next page."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ...config import SCROLL_THRESHOLD


@dataclass(frozen=True)
class ScrollMetrics:
    scroll_offset: float
    viewport_height: float
    content_height: float

    @property
    def distance_to_end(self) -> float:
        return self.content_height - (self.scroll_offset + self.viewport_height)


class InfiniteScrollController:
    """Decide from scroll metrics whether another page should be requested.

    The condition is level-triggered: every scroll report is evaluated on its
    own, and the loading check keeps repeated reports from stacking requests
    while a page is still in flight.
    """

    def __init__(
        self,
        is_loading: Callable[[], bool],
        has_more: Callable[[], bool],
        request_load: Callable[[], None],
        threshold: int = SCROLL_THRESHOLD,
    ) -> None:
        self._is_loading = is_loading
        self._has_more = has_more
        self._request_load = request_load
        self._threshold = threshold

    @property
    def threshold(self) -> int:
        return self._threshold

    def is_near_end(self, metrics: ScrollMetrics) -> bool:
        return (
            metrics.scroll_offset + metrics.viewport_height
            >= metrics.content_height - self._threshold
        )

    def should_load(self, metrics: ScrollMetrics) -> bool:
        return self.is_near_end(metrics) and not self._is_loading() and self._has_more()

    def on_scroll(self, metrics: ScrollMetrics) -> bool:
        """Request a load when warranted; return whether one was requested."""
        if not self.should_load(metrics):
            return False
        self._request_load()
        return True
