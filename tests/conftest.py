"""
Shared test fixtures and configuration.

The domain layer needs no fixtures; API tests build their own clients so
each test controls whether lifespan events run.
"""

import pytest

from src.config.settings import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Ensure each test reads settings fresh from the environment."""
    get_settings.cache_clear()
