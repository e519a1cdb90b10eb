from .bus import EventBus, Subscription
from .domain_events import DomainEvent
from .picker_events import (
    CatalogLoadedEvent,
    FilterAppliedEvent,
    IconConfirmedEvent,
    IconSelectedEvent,
    PageLoadedEvent,
)

__all__ = [
    "CatalogLoadedEvent",
    "DomainEvent",
    "EventBus",
    "FilterAppliedEvent",
    "IconConfirmedEvent",
    "IconSelectedEvent",
    "PageLoadedEvent",
    "Subscription",
]
