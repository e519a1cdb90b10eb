"""Custom exception hierarchy for the icon picker."""

from __future__ import annotations


class IconPickerError(Exception):
    """Base class for all custom errors raised by the icon picker."""


class DomainError(IconPickerError):
    """Base class for domain-level errors."""


class InfrastructureError(IconPickerError):
    """Base class for infrastructure-level errors."""


# --- Domain errors ---

class CatalogValidationError(DomainError):
    """Raised when raw candidate names cannot be normalised into items."""


# --- Infrastructure errors ---

class CatalogIOError(InfrastructureError):
    """Raised when the icon base directory cannot be enumerated."""


class PageRenderError(InfrastructureError):
    """Raised when a loaded page could not be handed to the list widget."""


class SettingsError(IconPickerError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""


__all__ = [
    "CatalogIOError",
    "CatalogValidationError",
    "DomainError",
    "IconPickerError",
    "InfrastructureError",
    "PageRenderError",
    "SettingsError",
    "SettingsLoadError",
    "SettingsValidationError",
]
