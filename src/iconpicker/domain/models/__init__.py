from .item import IconItem, derive_display_text

__all__ = ["IconItem", "derive_display_text"]
