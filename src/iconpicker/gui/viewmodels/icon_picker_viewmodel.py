"""Pure Python icon picker ViewModel (MVVM), no Qt dependency.

Owns all per-dialog state: the catalog, the filtered and displayed item
sequences, the single-flight load state and the selection.  The Qt dialog
binds to it through a :class:`~iconpicker.gui.ui.render.RenderAdapter`; tests
bind a headless adapter and a :class:`ManualScheduler`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence

from ...application.services.item_catalog import ItemCatalog
from ...application.services.page_loader import PageLoader, PageResult
from ...application.services.search_filter import SearchFilter
from ...config import DEFAULT_PAGE_SIZE, LOAD_DELAY_MS, SCROLL_THRESHOLD
from ...domain.models.item import IconItem
from ...events.bus import EventBus
from ...events.domain_events import DomainEvent
from ...events.picker_events import (
    CatalogLoadedEvent,
    FilterAppliedEvent,
    IconConfirmedEvent,
    IconSelectedEvent,
    PageLoadedEvent,
)
from .base import BaseViewModel
from .infinite_scroll import InfiniteScrollController, ScrollMetrics
from .load_state import LoadState, LoadStateMachine
from .scheduler import ImmediateScheduler, Scheduler
from .selection_state import SelectionState
from .signal import ObservableProperty, Signal


@dataclass(frozen=True)
class PickerOptions:
    page_size: int = DEFAULT_PAGE_SIZE
    scroll_threshold: int = SCROLL_THRESHOLD
    load_delay_ms: int = LOAD_DELAY_MS

    @classmethod
    def from_settings(cls, settings: Any) -> PickerOptions:
        """Build options from a :class:`SettingsManager`-like ``get`` provider."""
        return cls(
            page_size=int(settings.get("picker.page_size", DEFAULT_PAGE_SIZE)),
            scroll_threshold=int(settings.get("picker.scroll_threshold", SCROLL_THRESHOLD)),
            load_delay_ms=int(settings.get("picker.load_delay_ms", LOAD_DELAY_MS)),
        )


class IconPickerViewModel(BaseViewModel):
    """Searchable, paginated, single-selection picker state.

    Loads are single-flight: :meth:`load_more` schedules one page through the
    injected scheduler and ignores further requests until it completes.  Each
    :meth:`apply_filter` bumps a generation counter; a load that completes
    under an older generation is discarded and a fresh first page is loaded
    for the current filter instead.
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        options: Optional[PickerOptions] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        super().__init__()
        self._options = options or PickerOptions()
        self._scheduler: Scheduler = scheduler or ImmediateScheduler()
        self._event_bus = event_bus
        self._logger = logging.getLogger(__name__)

        self._catalog = ItemCatalog()
        self._search = SearchFilter()
        self._pages = PageLoader(self._options.page_size)
        self._load_state = LoadStateMachine()
        self._selection = SelectionState()
        self._scroll = InfiniteScrollController(
            is_loading=lambda: self._load_state.is_loading,
            has_more=self.has_more,
            request_load=self.load_more,
            threshold=self._options.scroll_threshold,
        )
        self._adapter: Any = None
        self._generation = 0

        # Observable properties
        self.query = ObservableProperty("")
        self.loading = ObservableProperty(False)
        self.displayed_count = ObservableProperty(0)
        self.match_count = ObservableProperty(0)
        self.has_more_pages = ObservableProperty(False)

        # Signals
        self.items_appended = Signal("items_appended")  # (page_items)
        self.items_cleared = Signal("items_cleared")
        self.selection_changed = Signal("selection_changed")  # (new_id, old_id)
        self.accepted = Signal("accepted")  # (icon_id)
        self.error_occurred = Signal("error_occurred")  # (message)

        self.track_connection(self._selection.selection_changed, self._on_selection_changed)
        self.track_connection(self._selection.confirmed, self._on_confirmed)
        self.track_connection(self._load_state.state_changed, self._on_load_state_changed)

    # -- state accessors ---------------------------------------------------

    @property
    def options(self) -> PickerOptions:
        return self._options

    @property
    def all_items(self) -> Sequence[IconItem]:
        return self._catalog.items

    @property
    def filtered_items(self) -> Sequence[IconItem]:
        return self._pages.filtered_items

    @property
    def displayed_items(self) -> Sequence[IconItem]:
        return self._pages.displayed_items

    @property
    def current_page(self) -> int:
        return self._pages.current_page

    @property
    def page_size(self) -> int:
        return self._pages.page_size

    @property
    def load_state(self) -> LoadState:
        return self._load_state.state

    @property
    def is_loading(self) -> bool:
        return self._load_state.is_loading

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_confirmed(self) -> bool:
        return self._selection.is_confirmed

    # -- wiring ------------------------------------------------------------

    def bind(self, adapter: Any) -> None:
        """Attach a render adapter and register the input handlers on it."""
        self._adapter = adapter
        adapter.on_scroll(self.on_scroll)
        adapter.on_click(self.click)
        adapter.on_double_click(self.double_click)

    # -- catalog / filter --------------------------------------------------

    def initialize(self, base_path: str | os.PathLike[str], names: Iterable[str]) -> None:
        """Build the catalog; raises ``CatalogValidationError`` on bad input.

        The filtered sequence starts out as the whole catalog with nothing
        displayed yet.
        """
        items = self._catalog.initialize(base_path, names)
        self._publish(CatalogLoadedEvent(base_path=self._catalog.base_path, item_count=len(items)))
        self.apply_filter("")

    def open(self, base_path: str | os.PathLike[str], names: Iterable[str]) -> None:
        """Initialise the catalog and request the first page."""
        self.initialize(base_path, names)
        self.load_more()

    def apply_filter(self, query: Optional[str]) -> List[IconItem]:
        """Recompute the filtered items and reset pagination in one step."""
        filtered = self._search.apply(self._catalog.items, query)
        self._pages.reset(filtered)
        self._generation += 1

        if self._adapter is not None:
            self._adapter.clear()
        self.items_cleared.emit()

        self.query.value = self._search.query
        self.match_count.value = len(filtered)
        self._sync_page_state()
        self._publish(FilterAppliedEvent(query=self._search.query, match_count=len(filtered)))
        return filtered

    def search(self, query: Optional[str]) -> None:
        """Apply *query* and request the first page of its results."""
        self.apply_filter(query)
        self.load_more()

    # -- pagination --------------------------------------------------------

    def next_page(self) -> List[IconItem]:
        result = self._pages.load_next_page()
        self._sync_page_state()
        return result.items

    def has_more(self) -> bool:
        return self._pages.has_more()

    def load_more(self) -> None:
        """Schedule materialisation of the next page unless one is pending."""
        if not self._load_state.begin():
            return
        generation = self._generation
        self._scheduler.call_later(
            self._options.load_delay_ms,
            lambda: self._complete_load(generation),
        )

    def on_scroll(self, metrics: ScrollMetrics) -> bool:
        return self._scroll.on_scroll(metrics)

    def _complete_load(self, generation: int) -> None:
        if self.disposed:
            self._load_state.finish()
            return
        if generation != self._generation:
            self._logger.debug(
                "Discarding page load from generation %d (current %d)",
                generation,
                self._generation,
            )
            self._load_state.finish()
            # The view was cleared by the newer filter and still needs its first page.
            if self._pages.current_page == 0:
                self.load_more()
            return

        result: Optional[PageResult] = None
        try:
            result = self._pages.load_next_page()
            if result.items and self._adapter is not None:
                self._adapter.append(result.items)
        except Exception as exc:
            # The page only counts as displayed once the adapter has it.
            if result is not None:
                self._pages.rollback(result)
                result = None
            self._logger.error("Failed to render page: %s", exc)
            self.error_occurred.emit(str(exc))
        finally:
            self._sync_page_state()
            self._load_state.finish()

        if result is None:
            return
        self._publish(PageLoadedEvent(page=result.page, item_count=len(result.items)))
        # Emitted once idle so listeners can immediately request the next page.
        if result.items:
            self.items_appended.emit(result.items)

    def _sync_page_state(self) -> None:
        self.displayed_count.value = len(self._pages.displayed_items)
        self.has_more_pages.value = self._pages.has_more()

    # -- selection ---------------------------------------------------------

    def click(self, icon_id: str) -> None:
        self._selection.select(icon_id)

    def double_click(self, icon_id: str) -> None:
        self._selection.confirm(icon_id)

    def get_selected(self) -> Optional[str]:
        return self._selection.get_selected()

    def clear_selection(self) -> None:
        self._selection.clear()

    def _on_selection_changed(self, new_id: Optional[str], old_id: Optional[str]) -> None:
        self.selection_changed.emit(new_id, old_id)
        if new_id is not None:
            self._publish(IconSelectedEvent(icon_id=new_id))

    def _on_confirmed(self, icon_id: str) -> None:
        self._publish(IconConfirmedEvent(icon_id=icon_id))
        self.accepted.emit(icon_id)

    def _on_load_state_changed(self, new_state: LoadState, old_state: LoadState) -> None:
        self.loading.value = new_state is LoadState.LOADING

    # -- lifecycle ---------------------------------------------------------

    def dispose(self) -> None:
        super().dispose()
        self._adapter = None
        for signal in (
            self.items_appended,
            self.items_cleared,
            self.selection_changed,
            self.accepted,
            self.error_occurred,
        ):
            signal.disconnect_all()

    def _publish(self, event: DomainEvent) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(event)
