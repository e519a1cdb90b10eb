from .item_catalog import ItemCatalog
from .page_loader import PageLoader, PageResult
from .search_filter import SearchFilter, matches_query

__all__ = [
    "ItemCatalog",
    "PageLoader",
    "PageResult",
    "SearchFilter",
    "matches_query",
]
