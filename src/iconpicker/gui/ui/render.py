"""Render adapter capability interface and the pure markup renderer."""

from __future__ import annotations

from html import escape
from typing import Callable, List, Protocol, Sequence

from ...domain.models.item import IconItem
from ..viewmodels.infinite_scroll import ScrollMetrics

ScrollHandler = Callable[[ScrollMetrics], object]
ItemHandler = Callable[[str], object]


class RenderAdapter(Protocol):
    """What the picker needs from a concrete list widget."""

    def append(self, items: Sequence[IconItem]) -> None: ...

    def clear(self) -> None: ...

    def on_scroll(self, handler: ScrollHandler) -> None: ...

    def on_click(self, handler: ItemHandler) -> None: ...

    def on_double_click(self, handler: ItemHandler) -> None: ...


def render_markup(item: IconItem) -> str:
    """Return the HTML list entry for *item*."""

    item_id = escape(item.id, quote=True)
    icon = escape(item.icon_path, quote=True)
    text = escape(item.display_text, quote=True)
    return (
        f'<li class="list-item" data-id="{item_id}">'
        f'<img src="{icon}" loading="lazy" alt="{text}">'
        f'<div class="item-text">{text}</div>'
        "</li>"
    )


class MarkupRenderAdapter:
    """Headless adapter that accumulates rendered markup.

    Used by the ``list --html`` command and by tests that drive the picker
    without a widget toolkit.  ``scroll``/``click``/``double_click`` replay
    user input into the registered handlers.
    """

    def __init__(self) -> None:
        self.fragments: List[str] = []
        self.ids: List[str] = []
        self.append_calls = 0
        self.clear_calls = 0
        self._scroll_handlers: List[ScrollHandler] = []
        self._click_handlers: List[ItemHandler] = []
        self._double_click_handlers: List[ItemHandler] = []

    def append(self, items: Sequence[IconItem]) -> None:
        self.append_calls += 1
        for item in items:
            self.fragments.append(render_markup(item))
            self.ids.append(item.id)

    def clear(self) -> None:
        self.clear_calls += 1
        self.fragments.clear()
        self.ids.clear()

    def on_scroll(self, handler: ScrollHandler) -> None:
        self._scroll_handlers.append(handler)

    def on_click(self, handler: ItemHandler) -> None:
        self._click_handlers.append(handler)

    def on_double_click(self, handler: ItemHandler) -> None:
        self._double_click_handlers.append(handler)

    # -- input replay ------------------------------------------------------

    def scroll(self, scroll_offset: float, viewport_height: float, content_height: float) -> None:
        metrics = ScrollMetrics(scroll_offset, viewport_height, content_height)
        for handler in list(self._scroll_handlers):
            handler(metrics)

    def click(self, item_id: str) -> None:
        for handler in list(self._click_handlers):
            handler(item_id)

    def double_click(self, item_id: str) -> None:
        for handler in list(self._double_click_handlers):
            handler(item_id)

    def html(self) -> str:
        return f'<ul class="listview">{"".join(self.fragments)}</ul>'
