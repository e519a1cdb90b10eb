"""Tests for ItemCatalog normalisation."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from iconpicker.application.services.item_catalog import ItemCatalog
from iconpicker.domain.models.item import IconItem, derive_display_text
from iconpicker.errors import CatalogValidationError, DomainError


class TestDeriveDisplayText:
    def test_dash_becomes_space(self):
        assert derive_display_text("abc-def.svg") == "abc def"

    def test_underscore_becomes_space(self):
        assert derive_display_text("foo_bar.svg") == "foo bar"

    def test_mixed_separators(self):
        assert derive_display_text("arrow-left_alt.svg") == "arrow left alt"

    def test_name_without_suffix_is_kept(self):
        assert derive_display_text("logo") == "logo"

    def test_every_suffix_occurrence_removed(self):
        assert derive_display_text("a.svg.svg") == "a"


class TestItemCatalog:
    def test_initialize_builds_items_in_order(self):
        catalog = ItemCatalog()
        items = catalog.initialize("/icons", ["b-one.svg", "a_two.svg", "c.svg"])

        assert [item.id for item in items] == ["b-one.svg", "a_two.svg", "c.svg"]
        assert [item.display_text for item in items] == ["b one", "a two", "c"]
        assert catalog.base_path == "/icons"
        assert len(catalog) == 3

    def test_icon_path_joins_base_path(self, tmp_path: Path):
        catalog = ItemCatalog()
        (item,) = catalog.initialize(tmp_path, ["home.svg"])

        assert item == IconItem(
            id="home.svg",
            icon_path=os.path.join(str(tmp_path), "home.svg"),
            display_text="home",
        )

    def test_duplicates_are_kept(self):
        catalog = ItemCatalog()
        items = catalog.initialize("/icons", ["x.svg", "x.svg"])

        assert len(items) == 2
        assert items[0] == items[1]

    def test_items_are_immutable_sequence(self):
        catalog = ItemCatalog()
        catalog.initialize("/icons", ["x.svg"])

        assert isinstance(catalog.items, tuple)

    def test_non_string_name_raises(self):
        catalog = ItemCatalog()
        with pytest.raises(CatalogValidationError, match="Entry 1"):
            catalog.initialize("/icons", ["ok.svg", 42])

    def test_single_string_rejected(self):
        catalog = ItemCatalog()
        with pytest.raises(CatalogValidationError):
            catalog.initialize("/icons", "home.svg")

    def test_bad_base_path_raises(self):
        catalog = ItemCatalog()
        with pytest.raises(CatalogValidationError):
            catalog.initialize(None, ["a.svg"])

    def test_bytes_base_path_raises(self):
        catalog = ItemCatalog()
        with pytest.raises(CatalogValidationError, match="must be text"):
            catalog.initialize(b"/icons", ["a.svg"])

        assert catalog.items == ()

    def test_failed_initialize_keeps_previous_items(self):
        catalog = ItemCatalog()
        catalog.initialize("/icons", ["a.svg"])
        with pytest.raises(CatalogValidationError):
            catalog.initialize("/icons", [None])

        assert [item.id for item in catalog.items] == ["a.svg"]

    def test_validation_error_is_domain_error(self):
        assert issubclass(CatalogValidationError, DomainError)
