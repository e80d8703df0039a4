"""
==============================================================================
Settings Tests
==============================================================================

Tests for configuration loading and validation.

==============================================================================
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from app.config import Settings, get_settings


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self):
        """Test default configuration values."""
        settings = Settings(_env_file=None)
        assert settings.products_path == Path("data/products.json")
        assert settings.default_search_strategy == "linear"
        assert settings.app_env == "development"
        assert not settings.is_production

    def test_environment_override(self, monkeypatch):
        """Test values are read from environment variables."""
        monkeypatch.setenv("PRODUCTS_FILE", "/tmp/catalog.json")
        monkeypatch.setenv("DEFAULT_SEARCH_STRATEGY", "INDEXED")
        settings = Settings(_env_file=None)
        assert settings.products_path == Path("/tmp/catalog.json")
        assert settings.default_search_strategy == "indexed"

    def test_unknown_strategy_rejected(self):
        """Test unsupported strategies fail validation."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, default_search_strategy="fuzzy")

    def test_unknown_env_defaults_to_development(self):
        """Test unrecognised environments fall back to development."""
        settings = Settings(_env_file=None, app_env="Qa")
        assert settings.app_env == "development"

    def test_production_env(self):
        """Test environment names are normalised."""
        settings = Settings(_env_file=None, app_env=" PRODUCTION ")
        assert settings.is_production

    def test_cors_origins_list(self):
        """Test CORS origins are parsed from JSON."""
        settings = Settings(_env_file=None, cors_origins='["http://localhost:3000"]')
        assert settings.cors_origins_list == ["http://localhost:3000"]

    def test_invalid_cors_origins(self):
        """Test malformed CORS origins fall back to a wildcard."""
        settings = Settings(_env_file=None, cors_origins="localhost")
        assert settings.cors_origins_list == ["*"]

    def test_get_settings_cached(self):
        """Test get_settings returns a shared instance."""
        assert get_settings() is get_settings()
