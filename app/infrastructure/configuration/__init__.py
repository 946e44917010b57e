"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
application using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    languages = settings.i18n.languages
    client_load = settings.i18n.client_load

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure.i18n import I18nSettings

settings = Settings()

__all__ = ["settings", "Settings", "I18nSettings"]
