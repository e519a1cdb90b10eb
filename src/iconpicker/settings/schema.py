"""Schema helpers for the icon picker settings file."""

from __future__ import annotations

import os
from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import DEFAULT_PAGE_SIZE, ICON_SUFFIX, LOAD_DELAY_MS, SCROLL_THRESHOLD

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "iconpicker/settings.schema.json",
    "type": "object",
    "required": ["schema", "picker"],
    "properties": {
        "schema": {"const": "iconpicker/settings@1"},
        "assets_root": {"type": ["string", "null"]},
        "picker": {
            "type": "object",
            "properties": {
                "page_size": {"type": "integer", "minimum": 1},
                "scroll_threshold": {"type": "integer", "minimum": 0},
                "load_delay_ms": {"type": "integer", "minimum": 0},
                "icon_suffix": {"type": ["string", "null"]},
            },
            "additionalProperties": True,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "iconpicker/settings@1",
    "assets_root": None,
    "picker": {
        "page_size": DEFAULT_PAGE_SIZE,
        "scroll_threshold": SCROLL_THRESHOLD,
        "load_delay_ms": LOAD_DELAY_MS,
        "icon_suffix": ICON_SUFFIX,
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key == "picker" and isinstance(value, dict):
                merged.setdefault("picker", {}).update(value)
                continue
            if key == "assets_root" and value not in {None, ""}:
                try:
                    merged[key] = os.fspath(value)
                except TypeError:
                    continue
                continue
            merged[key] = value
    validate_settings(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the settings schema."""

    _validator.validate(data)


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults", "validate_settings"]
