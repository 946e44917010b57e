from fastapi import APIRouter, Request

from infrastructure.services import I18nServiceDep, SettingsDep

router = APIRouter(tags=["System"])


@router.get("/version")
def get_version(settings: SettingsDep):
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
def get_health():
    """Healthcheck endpoint."""
    return {"status": "ok"}


@router.get("/i18n")
def get_i18n(request: Request, i18n: I18nServiceDep):
    """Report the supported languages and the locale negotiated for this request."""
    return {
        "languages": list(i18n.options.languages),
        "defaultLanguage": i18n.options.default_language,
        "locale": getattr(request.state, "locale", i18n.options.default_language),
        "localesAvailable": i18n.locales_available(),
    }
