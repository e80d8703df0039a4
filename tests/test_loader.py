"""
==============================================================================
Catalog Loader Tests
==============================================================================

Tests for JSON loading and the global catalog instance.

==============================================================================
"""

import json
import logging

import pytest

from app.catalog import (
    CatalogStore,
    get_catalog,
    init_catalog,
    load_catalog,
    load_products,
    reset_catalog,
    sample_products,
)
from app.catalog.loader import parse_products


@pytest.fixture
def write_json(tmp_path):
    """Write data to a JSON file and return its path."""
    def _write(data, name="products.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def clean_catalog():
    """Reset the global catalog around each test."""
    reset_catalog()
    yield
    reset_catalog()


class TestLoadProducts:
    """Tests for reading products from JSON."""

    def test_flat_list(self, write_json):
        """Test loading a list of records."""
        path = write_json([
            {"name": "Laptop", "category": "Eletrônicos", "brand": "MarcaA"},
            {"name": "Mesa", "category": "Mobília", "brand": "MarcaC"},
        ])
        products = load_products(path)
        assert [p.name for p in products] == ["Laptop", "Mesa"]
        assert products[0].category == "Eletrônicos"

    def test_grouped_by_category(self, write_json):
        """Test loading records grouped under their category."""
        path = write_json({
            "Eletrônicos": [
                {"name": "Laptop", "brand": "MarcaA"},
                {"name": "Smartphone", "brand": "MarcaB"},
            ],
            "Mobília": [
                {"name": "Cadeira", "brand": "MarcaC"},
                {"name": "Mesa", "brand": "MarcaC"},
            ],
        })
        assert load_products(path) == sample_products()

    def test_skips_incomplete_records(self, write_json):
        """Test records missing a field are skipped."""
        path = write_json([
            {"name": "Laptop", "category": "Eletrônicos", "brand": "MarcaA"},
            {"name": "Tablet", "category": "Eletrônicos"},
            {"name": 42, "category": "Mobília", "brand": "MarcaC"},
            "not a record",
        ])
        assert [p.name for p in load_products(path)] == ["Laptop"]

    def test_skips_invalid_category(self, write_json):
        """Test grouped categories must hold lists."""
        path = write_json({"Mobília": {"name": "Mesa"}, "Eletrônicos": [{"name": "Laptop", "brand": "MarcaA"}]})
        assert [p.name for p in load_products(path)] == ["Laptop"]

    def test_empty_list(self, write_json):
        """Test an empty file list gives an empty catalog."""
        assert load_products(write_json([])) == []

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_products(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON raises JSONDecodeError."""
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_products(path)

    def test_group_key_sets_category(self, write_json, caplog):
        """Test a grouped record keeps the category of its group."""
        path = write_json({"Mobília": [{"name": "Mesa", "brand": "MarcaC", "category": "Eletrônicos"}]})
        with caplog.at_level(logging.WARNING, logger="app.catalog.loader"):
            products = load_products(path)
        assert [p.category for p in products] == ["Mobília"]
        assert "replaced by group" in caplog.text

    def test_invalid_utf8_logged(self, tmp_path, caplog):
        """Test a file that is not UTF-8 is logged and re-raised."""
        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"name": "\xff", "category": "M\xf3veis", "brand": "MarcaC"}]')
        with caplog.at_level(logging.ERROR, logger="app.catalog.loader"):
            with pytest.raises(UnicodeDecodeError):
                load_products(path)
        assert "not valid UTF-8" in caplog.text

    def test_unsupported_layout_in_file_logged(self, write_json, caplog):
        """Test a scalar JSON document is logged and re-raised."""
        path = write_json("products")
        with caplog.at_level(logging.ERROR, logger="app.catalog.loader"):
            with pytest.raises(ValueError):
                load_products(path)
        assert "Invalid catalog" in caplog.text

    def test_unsupported_layout(self):
        """Test scalar JSON documents are rejected."""
        with pytest.raises(ValueError):
            parse_products("products")


class TestGlobalCatalog:
    """Tests for the global catalog instance."""

    def test_not_loaded_by_default(self):
        """Test no catalog exists before initialisation."""
        assert get_catalog() is None

    def test_init_catalog(self):
        """Test init_catalog installs a store."""
        store = init_catalog(sample_products())
        assert isinstance(store, CatalogStore)
        assert get_catalog() is store
        assert len(store) == 4

    def test_load_catalog(self, write_json):
        """Test load_catalog reads a file into the global store."""
        path = write_json([{"name": "Mesa", "category": "Mobília", "brand": "MarcaC"}])
        store = load_catalog(path)
        assert get_catalog() is store
        assert store.positions_by_brand("MarcaC") == (0,)

    def test_reset_catalog(self):
        """Test reset_catalog drops the store."""
        init_catalog(sample_products())
        reset_catalog()
        assert get_catalog() is None
