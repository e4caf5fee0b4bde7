"""Tests for settings and logging configuration."""

import logging

import pytest
import structlog
from pydantic import ValidationError
from py_terrain.config import Settings, settings
from py_terrain.utils.logging import configure_logging


class TestSettings:
    """Test application settings."""

    def test_defaults(self, monkeypatch):
        """Test default values."""
        for name in ("DEFAULT_MAP_WIDTH", "DEFAULT_MAP_HEIGHT", "DEFAULT_SEED", "LOG_LEVEL"):
            monkeypatch.delenv(f"PY_TERRAIN_{name}", raising=False)

        config = Settings(_env_file=None)

        assert config.default_map_width == 70
        assert config.default_map_height == 35
        assert config.default_seed == 42
        assert config.log_level == "INFO"
        assert config.log_format == "json"

    def test_environment_override(self, monkeypatch):
        """Test that prefixed environment variables override defaults."""
        monkeypatch.setenv("PY_TERRAIN_DEFAULT_SEED", "7")
        monkeypatch.setenv("PY_TERRAIN_DEFAULT_MAP_WIDTH", "120")

        config = Settings(_env_file=None)

        assert config.default_seed == 7
        assert config.default_map_width == 120

    def test_invalid_map_size(self, monkeypatch):
        """Test that non-positive default sizes are rejected."""
        monkeypatch.setenv("PY_TERRAIN_DEFAULT_MAP_HEIGHT", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_singleton(self):
        """Test that a module-level settings instance exists."""
        assert isinstance(settings, Settings)


class TestLogging:
    """Test structlog configuration."""

    @pytest.fixture(autouse=True)
    def reset_structlog(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        structlog.reset_defaults()
        root.handlers[:] = handlers
        root.setLevel(level)

    @pytest.mark.parametrize("log_format", ["json", "console"])
    def test_configure(self, log_format):
        """Test that logging can be configured in either format."""
        configure_logging(level="debug", log_format=log_format)

        assert logging.getLogger().level == logging.DEBUG
        assert structlog.is_configured()
        structlog.get_logger("py_terrain.test").info("configured", log_format=log_format)

    def test_defaults_from_settings(self):
        """Test that omitted arguments fall back to settings."""
        configure_logging()
        assert logging.getLogger().level == logging.getLevelName(settings.log_level.upper())
