"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n.models import Translator
from infrastructure.i18n.service import I18nService
from infrastructure.services.providers import (
    get_i18n_service,
    get_request_translator,
    get_settings,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# I18n service dependency
I18nServiceDep = Annotated[I18nService, Depends(get_i18n_service)]

# Request translator dependency - set per request by I18nMiddleware
TranslatorDep = Annotated[Translator, Depends(get_request_translator)]

__all__ = [
    "SettingsDep",
    "I18nServiceDep",
    "TranslatorDep",
]
