"""Display item built from a raw icon file name."""

from __future__ import annotations

import os
from dataclasses import dataclass

from ...config import ICON_SUFFIX


@dataclass(frozen=True)
class IconItem:
    id: str
    icon_path: str
    display_text: str

    @classmethod
    def from_name(cls, base_path: str | os.PathLike[str], name: str) -> IconItem:
        return cls(
            id=name,
            icon_path=os.path.join(os.fspath(base_path), name),
            display_text=derive_display_text(name),
        )


def derive_display_text(name: str, suffix: str = ICON_SUFFIX) -> str:
    """Return the human readable label for *name*.

    Every occurrence of *suffix* is dropped and dashes/underscores become
    spaces, so ``"arrow-left_alt.svg"`` reads ``"arrow left alt"``.
    """

    return name.replace(suffix, "").replace("-", " ").replace("_", " ")
