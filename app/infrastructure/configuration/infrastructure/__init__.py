"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.i18n import (
    ClientLoadConfig,
    FallbackPolicy,
    I18nSettings,
)

__all__ = [
    "ClientLoadConfig",
    "FallbackPolicy",
    "I18nSettings",
]
