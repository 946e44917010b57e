"""Factory functions for creating i18n components.

Provides convenience functions for building runtime i18n options and the
service from application settings.
"""

from pathlib import Path
from typing import Callable, Optional

from infrastructure.configuration import Settings
from infrastructure.i18n.models import (
    FallbackOptions,
    I18nOptions,
    IndicatorFormat,
    IndicatorPredicate,
    default_indicator_format,
)
from infrastructure.i18n.service import I18nService
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def default_locales_dir() -> Path:
    """Locate the application's bundled locales directory."""
    # This file is at .../app/infrastructure/i18n/factory.py
    return Path(__file__).resolve().parents[2] / "locales"


def create_i18n_options(
    settings: Optional[Settings] = None,
    is_production: Optional[Callable[[], bool]] = None,
    indicator_format: IndicatorFormat = default_indicator_format,
    should_show_indicator: Optional[IndicatorPredicate] = None,
) -> I18nOptions:
    """Create runtime i18n options from application settings.

    If no locales directory is configured, the bundled app/locales directory
    is used.

    Args:
        settings: Application settings (default: loaded from environment).
        is_production: Production check (default: settings.is_production).
        indicator_format: Fallback indicator formatter.
        should_show_indicator: Optional fallback indicator predicate.

    Returns:
        I18nOptions: Options for I18nService and I18nMiddleware.

    Usage:
        options = create_i18n_options()
        options = create_i18n_options(is_production=lambda: True)
    """
    settings = settings or Settings()
    i18n_settings = settings.i18n

    if is_production is None:

        def is_production() -> bool:
            return settings.is_production

    return I18nOptions(
        languages=tuple(i18n_settings.languages),
        default_language=i18n_settings.default_language,
        locales_dir=i18n_settings.locales_dir or default_locales_dir(),
        is_production=is_production,
        fallback=FallbackOptions(
            enabled=i18n_settings.fallback_enabled,
            show_indicator=i18n_settings.fallback_show_indicator,
            indicator_format=indicator_format,
            should_show_indicator=should_show_indicator,
            apply_on_dev=i18n_settings.fallback_apply_on_dev,
        ),
        show_keys_in_prod=i18n_settings.show_keys_in_prod,
        client_load=i18n_settings.client_load,
    )


def create_i18n_service(
    settings: Optional[Settings] = None,
    options: Optional[I18nOptions] = None,
) -> I18nService:
    """Create and configure an I18nService instance.

    Args:
        settings: Application settings, used when options are not given.
        options: Pre-built runtime options.

    Returns:
        I18nService: Configured service.
    """
    options = options or create_i18n_options(settings)
    logger.info(
        "i18n_service_created",
        languages=list(options.languages),
        default_language=options.default_language,
        locales_dir=str(options.locales_dir),
        client_load_enabled=options.client_load is not None,
    )
    return I18nService(options)
