"""Shared fixtures for the application test suite."""

import sys
from pathlib import Path

import pytest

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from infrastructure.logging import clear_request_context  # noqa: E402
from infrastructure.services.providers import (  # noqa: E402
    get_i18n_service,
    get_settings,
)


@pytest.fixture(autouse=True)
def reset_cached_providers():
    """Clear cached singletons and logging context between tests."""
    get_settings.cache_clear()
    get_i18n_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_i18n_service.cache_clear()
    clear_request_context()


@pytest.fixture
def app_locales_dir():
    """Bundled application locales directory."""
    return Path(project_root) / "locales"
