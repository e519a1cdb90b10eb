"""Enumerate raw icon names from an assets directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from ..errors import CatalogIOError

LOGGER = logging.getLogger(__name__)


def resolve_base_path(base_dir: str | os.PathLike[str], assets_root: Optional[Path] = None) -> Path:
    """Return *base_dir* as an absolute path, anchored at *assets_root* if relative."""

    path = Path(base_dir).expanduser()
    if not path.is_absolute() and assets_root is not None:
        path = Path(assets_root).expanduser() / path
    return path.resolve()


def list_icon_names(base_path: str | os.PathLike[str], suffix: Optional[str] = None) -> List[str]:
    """Return the entry names of *base_path* sorted by name.

    Names are returned verbatim; only when *suffix* is given are entries that
    do not end with it (case-insensitively) skipped.  Any ``OSError`` raised
    while listing is re-raised as :class:`CatalogIOError`.
    """

    try:
        with os.scandir(base_path) as entries:
            names = [entry.name for entry in entries]
    except OSError as exc:
        raise CatalogIOError(f"Cannot enumerate icons in {os.fspath(base_path)}: {exc}") from exc

    if suffix:
        wanted = suffix.casefold()
        names = [name for name in names if name.casefold().endswith(wanted)]
    names.sort()
    LOGGER.debug("Found %d icon entries in %s", len(names), base_path)
    return names
