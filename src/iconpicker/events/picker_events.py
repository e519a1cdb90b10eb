from dataclasses import dataclass

from .domain_events import DomainEvent


@dataclass(frozen=True)
class CatalogLoadedEvent(DomainEvent):
    base_path: str = ""
    item_count: int = 0


@dataclass(frozen=True)
class FilterAppliedEvent(DomainEvent):
    query: str = ""
    match_count: int = 0


@dataclass(frozen=True)
class PageLoadedEvent(DomainEvent):
    page: int = 0
    item_count: int = 0


@dataclass(frozen=True)
class IconSelectedEvent(DomainEvent):
    icon_id: str = ""


@dataclass(frozen=True)
class IconConfirmedEvent(DomainEvent):
    icon_id: str = ""
