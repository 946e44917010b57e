from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging.setup import configure_logging
from infrastructure.services import get_i18n_service, get_settings

if TYPE_CHECKING:
    from infrastructure.configuration import Settings
    from infrastructure.i18n import I18nService


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(settings=settings)


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _check_locales(service: "I18nService", logger: BoundLogger) -> None:
    if not service.locales_available():
        logger.error(
            "locales_directory_missing",
            locales_dir=str(service.locales_dir),
        )
        return

    missing = [
        language
        for language in service.options.languages
        if not (service.locales_dir / language).is_dir()
    ]
    if missing:
        logger.warning("locale_folders_missing", languages=missing)

    logger.info(
        "i18n_ready",
        languages=list(service.options.languages),
        default_language=service.options.default_language,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)

    i18n_service = get_i18n_service()
    app.state.i18n_service = i18n_service
    _check_locales(i18n_service, logger)

    yield

    logger.info("application_shutdown")
