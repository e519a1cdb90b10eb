"""Default configuration values for the icon picker."""

from __future__ import annotations

from typing import Final

# Number of items materialized per infinite-scroll page.
DEFAULT_PAGE_SIZE: Final[int] = 50

# A new page is requested once the viewport bottom is within this many pixels
# of the end of the rendered content.
SCROLL_THRESHOLD: Final[int] = 100

# Artificial latency of a page fetch, in milliseconds.
LOAD_DELAY_MS: Final[int] = 50

ICON_SUFFIX: Final[str] = ".svg"

DIALOG_TITLE: Final[str] = "Select Icon"
DIALOG_DEFAULT_SIZE: Final[tuple[int, int]] = (420, 520)
ICON_PREVIEW_SIZE: Final[int] = 24

SEARCH_PLACEHOLDER: Final[str] = "Search icons"
