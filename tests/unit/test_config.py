"""
Unit tests for configuration and logging setup.
"""

import logging
import sys
from collections.abc import Generator

import pytest

from src.config.logging import LOG_FORMAT, configure_logging
from src.config.settings import Settings, get_settings


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """Put back root handlers and level after configure_logging replaces them."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults bind all interfaces on port 3000."""
        for var in ("APP_NAME", "HOST", "PORT", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)
        assert settings.app_name == "valuegate"
        assert settings.host == "0.0.0.0"
        assert settings.port == 3000
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables override defaults case-insensitively."""
        monkeypatch.setenv("port", "8080")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        settings = Settings(_env_file=None)
        assert settings.port == 8080
        assert settings.log_level == "DEBUG"

    def test_get_settings_cached(self) -> None:
        """get_settings returns the same instance."""
        assert get_settings() is get_settings()


@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_root_level(self) -> None:
        configure_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_lowercase_level_accepted(self) -> None:
        configure_logging("warning")
        assert logging.getLogger().level == logging.WARNING

    def test_handler_uses_format(self) -> None:
        """Root handler uses the application format."""
        configure_logging("INFO")
        handler = logging.getLogger().handlers[0]
        assert handler.formatter is not None
        assert handler.formatter._fmt == LOG_FORMAT

    def test_handler_writes_to_stderr(self) -> None:
        """Records go to stderr, leaving stdout to the server."""
        configure_logging("INFO")
        handler = logging.getLogger().handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
