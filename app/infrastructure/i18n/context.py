"""Request-scoped i18n context.

The middleware binds the current request's translations while the response is
rendered so that code without access to the request object can translate:

    from infrastructure.i18n import use_translation

    def render_title() -> str:
        t = use_translation()
        return t("features.dashboard.title")
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from infrastructure.i18n.exceptions import TranslationContextError
from infrastructure.i18n.models import I18nContextData, Translator
from infrastructure.i18n.translator import TranslatorConfig, make_translator

_i18n_context: ContextVar[Optional[I18nContextData]] = ContextVar(
    "i18n_context", default=None
)


@contextmanager
def bind_i18n_context(data: I18nContextData) -> Iterator[I18nContextData]:
    """Bind i18n data for the duration of a block.

    Args:
        data: Translation data of the current request.

    Yields:
        The bound data.
    """
    token = _i18n_context.set(data)
    try:
        yield data
    finally:
        _i18n_context.reset(token)


def get_i18n_context() -> Optional[I18nContextData]:
    """Get the bound i18n data, or None outside a request."""
    return _i18n_context.get()


def _require_context() -> I18nContextData:
    data = _i18n_context.get()
    if data is None:
        raise TranslationContextError(
            "No i18n context is bound to the current request"
        )
    return data


def use_translation() -> Translator:
    """Get a translator for the bound request.

    Returns:
        Translator over the bound translations (no fallback indicator).

    Raises:
        TranslationContextError: If called outside a bound request.
    """
    data = _require_context()
    return make_translator(
        data.translations,
        config=TranslatorConfig(locale=data.locale, default_locale=data.default_locale),
    )


def use_locale() -> str:
    """Get the locale of the bound request.

    Raises:
        TranslationContextError: If called outside a bound request.
    """
    return _require_context().locale
