"""Internationalization infrastructure settings."""

from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import SettingsConfigDict

from infrastructure.configuration.base import InfrastructureSettings


class FallbackPolicy(str, Enum):
    """What to ship to client-side code when no client-load route matches."""

    ALL = "all"
    NONE = "none"
    ALWAYS_ONLY = "always-only"


class ClientLoadConfig(BaseModel):
    """Route-driven selection of namespaces shipped to client-side code.

    NOTE: Patterns match request routes, not translation file paths. A route
    pattern like "/indicators/*" typically loads "features.indicators", which
    may be split across many source files.

    Attributes:
        always: Namespace prefixes shipped on every page.
        routes: Ordered mapping of route pattern to namespace prefixes.
        fallback: Policy applied when no route pattern matches.
        ignore_trailing_slash: Strip one trailing "/" before matching.
        warn_on_overlap: Log when more than one pattern matches in development.

    Example:
        ClientLoadConfig(
            always=["common"],
            routes={
                "/indicators/*": ["features.indicators"],
                "/admin/*": ["features.admin", "features.users"],
            },
            fallback=FallbackPolicy.ALWAYS_ONLY,
        )
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    always: List[str] = Field(default_factory=list)
    routes: Dict[str, List[str]] = Field(default_factory=dict)
    fallback: FallbackPolicy = FallbackPolicy.ALWAYS_ONLY
    ignore_trailing_slash: bool = Field(default=False, alias="ignoreTrailingSlash")
    warn_on_overlap: bool = Field(default=True, alias="warnOnOverlap")


class I18nSettings(InfrastructureSettings):
    """Translation loading and resolution configuration.

    Environment Variables:
        I18N_LANGUAGES: JSON list of supported language codes (default: ["en"])
        I18N_DEFAULT_LANGUAGE: Language used when no preference matches (default: en)
        I18N_LOCALES_DIR: Directory holding one folder per language
            (default: auto-discover app/locales)
        I18N_FALLBACK_ENABLED: Overlay the default language under the active one
        I18N_FALLBACK_SHOW_INDICATOR: Decorate fallback values with an indicator
        I18N_FALLBACK_APPLY_ON_DEV: Use production resolution behavior in development
        I18N_SHOW_KEYS_IN_PROD: Render "[key]" for missing keys in production
        I18N_CLIENT_LOAD: JSON object describing which namespaces are shipped
            to client-side code per route

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        languages = settings.i18n.languages
        if settings.i18n.fallback_enabled:
            # Overlay default language...
        ```
    """

    model_config = SettingsConfigDict(populate_by_name=True)

    languages: List[str] = Field(default_factory=lambda: ["en"], alias="I18N_LANGUAGES")
    default_language: str = Field(default="en", alias="I18N_DEFAULT_LANGUAGE")
    locales_dir: Optional[Path] = Field(default=None, alias="I18N_LOCALES_DIR")
    fallback_enabled: bool = Field(default=False, alias="I18N_FALLBACK_ENABLED")
    fallback_show_indicator: bool = Field(
        default=False, alias="I18N_FALLBACK_SHOW_INDICATOR"
    )
    fallback_apply_on_dev: bool = Field(
        default=False, alias="I18N_FALLBACK_APPLY_ON_DEV"
    )
    show_keys_in_prod: bool = Field(default=False, alias="I18N_SHOW_KEYS_IN_PROD")
    client_load: Optional[ClientLoadConfig] = Field(
        default=None, alias="I18N_CLIENT_LOAD"
    )
