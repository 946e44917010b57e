"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    I18nServiceDep,
    TranslatorDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_i18n_service,
    get_request_translator,
)

__all__ = [
    "SettingsDep",
    "I18nServiceDep",
    "TranslatorDep",
    "get_settings",
    "get_i18n_service",
    "get_request_translator",
]
