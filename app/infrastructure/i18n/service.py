"""I18n service for dependency injection.

Provides a class-based interface over the i18n pipeline so the middleware,
routes and tests share one configured entry point.
"""

from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from infrastructure.i18n.client_load import (
    SkipInjection,
    extract_namespaces,
    select_namespaces,
)
from infrastructure.i18n.loader import FileTranslationLoader, TranslationLoader
from infrastructure.i18n.merger import build_locale_translations
from infrastructure.i18n.models import (
    I18nOptions,
    MergedTranslations,
    ResolvedLocale,
    Translator,
)
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.translator import TranslatorConfig, make_translator


class I18nService:
    """Class-based i18n service.

    Usage:
        # Via dependency injection
        from infrastructure.services import I18nServiceDep

        @router.get("/languages")
        def languages(i18n: I18nServiceDep):
            return {"languages": list(i18n.options.languages)}

        # Direct instantiation
        service = I18nService(create_i18n_options())
        merged = service.build_translations("es")
        t = service.create_translator(merged, "es")
    """

    def __init__(
        self,
        options: I18nOptions,
        loader: Optional[TranslationLoader] = None,
    ):
        """Initialize i18n service.

        Args:
            options: Runtime i18n options.
            loader: Optional translation loader (defaults to FileTranslationLoader).
        """
        self.options = options
        self.loader = loader or FileTranslationLoader()
        self.locale_resolver = LocaleResolver(
            options.languages, options.default_language
        )

    @property
    def locales_dir(self) -> Path:
        return Path(self.options.locales_dir)

    def is_production(self) -> bool:
        """Whether production resolution behavior applies."""
        return bool(self.options.is_production and self.options.is_production())

    def locales_available(self) -> bool:
        """Whether the locales directory exists."""
        return self.locales_dir.is_dir()

    def resolve_locale(
        self, path: str, accept_language: Optional[str] = None
    ) -> ResolvedLocale:
        """Resolve the locale for a request path and Accept-Language header."""
        return self.locale_resolver.resolve(path, accept_language)

    def build_translations(self, locale: str) -> MergedTranslations:
        """Load and merge the translation table for a locale.

        Reads the locale files on every call.

        Args:
            locale: Supported language code.

        Returns:
            MergedTranslations with fallback provenance.
        """
        return build_locale_translations(
            self.locales_dir,
            locale,
            self.options.default_language,
            self.options.fallback.enabled,
            loader=self.loader,
        )

    def create_translator(self, merged: MergedTranslations, locale: str) -> Translator:
        """Create the request translator for a merged table.

        Args:
            merged: Result of build_translations.
            locale: Active language code.

        Returns:
            Translator honoring the configured fallback and production behavior.
        """
        fallback = self.options.fallback
        return make_translator(
            merged.table,
            merged.fallback_keys,
            TranslatorConfig(
                locale=locale,
                default_locale=self.options.default_language,
                show_keys_in_prod=self.options.show_keys_in_prod,
                show_fallback_indicator=fallback.enabled and fallback.show_indicator,
                fallback_indicator_format=fallback.indicator_format,
                should_show_fallback_indicator=fallback.should_show_indicator,
                apply_fallback_on_dev=fallback.apply_on_dev,
                is_production=self.options.is_production,
            ),
        )

    def client_namespaces(self, path: str) -> Union[List[str], SkipInjection, None]:
        """Select the client namespaces for a request path.

        Returns:
            Namespace prefixes, SKIP_INJECTION, or None when client loading
            is not configured.
        """
        if self.options.client_load is None:
            return None
        return select_namespaces(
            path, self.options.client_load, is_dev=not self.is_production()
        )

    def client_translations(
        self, merged: MergedTranslations, path: str
    ) -> Optional[Mapping[str, Any]]:
        """Extract the translations shipped to the client for a request path.

        Args:
            merged: Result of build_translations.
            path: Request path without locale prefix.

        Returns:
            The translation sub-table, or None when nothing is shipped.
        """
        namespaces = self.client_namespaces(path)
        if namespaces is None or isinstance(namespaces, SkipInjection):
            return None
        return extract_namespaces(merged.table, namespaces)
