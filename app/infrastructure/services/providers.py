"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from fastapi import Request

from infrastructure.configuration import Settings
from infrastructure.i18n.factory import create_i18n_service
from infrastructure.i18n.models import Translator
from infrastructure.i18n.service import I18nService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_i18n_service() -> I18nService:
    """
    Get application-scoped i18n service singleton.

    Returns:
        I18nService: Cached service configured from application settings.
    """
    return create_i18n_service(get_settings())


def get_request_translator(request: Request) -> Translator:
    """
    Get the translator attached to the current request by I18nMiddleware.

    Usage:
        @router.get("/title")
        def title(t: TranslatorDep):
            return {"title": t("features.dashboard.title")}

    Returns:
        Translator: The request translator, or a key-echoing translator when
        the middleware did not run.
    """
    translator = getattr(request.state, "t", None)
    if translator is None:
        return lambda key: f"[{key}]"
    return translator
