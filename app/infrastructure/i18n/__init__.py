"""i18n system - file-based translations for server-rendered pages.

Discovers JSON/YAML translation files per locale, merges the active locale
over the default one, resolves keys for rendering and ships route-selected
translations to the client.

Main components:
- discovery: translation file discovery and namespace naming
- loader: TranslationLoader and FileTranslationLoader (key flattening)
- merger: locale overlay with fallback tracking
- translator: make_translator and namespaced
- client_load / client: route-driven client payload and HTML injection
- resolvers: LocaleResolver
- service / factory / middleware: application wiring
"""

from infrastructure.i18n.client import (
    build_client_payload,
    inject_client_translations,
    serialize_client_payload,
    translator_from_payload,
)
from infrastructure.i18n.client_load import (
    SKIP_INJECTION,
    SkipInjection,
    extract_namespaces,
    match_route_pattern,
    normalize_url_path,
    select_namespaces,
)
from infrastructure.i18n.context import (
    bind_i18n_context,
    get_i18n_context,
    use_locale,
    use_translation,
)
from infrastructure.i18n.discovery import discover_translation_files, to_camel_case
from infrastructure.i18n.exceptions import I18nError, TranslationContextError
from infrastructure.i18n.factory import create_i18n_options, create_i18n_service
from infrastructure.i18n.loader import (
    FileTranslationLoader,
    TranslationLoader,
    flatten_document,
)
from infrastructure.i18n.merger import build_locale_translations, merge_locales
from infrastructure.i18n.middleware import I18nMiddleware
from infrastructure.i18n.models import (
    ClientLoadConfig,
    FallbackOptions,
    FallbackPolicy,
    I18nOptions,
    MergedTranslations,
    ResolvedLocale,
    Translator,
)
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.service import I18nService
from infrastructure.i18n.translator import TranslatorConfig, make_translator, namespaced

__all__ = [
    "ClientLoadConfig",
    "FallbackOptions",
    "FallbackPolicy",
    "I18nOptions",
    "MergedTranslations",
    "ResolvedLocale",
    "Translator",
    "discover_translation_files",
    "to_camel_case",
    "TranslationLoader",
    "FileTranslationLoader",
    "flatten_document",
    "merge_locales",
    "build_locale_translations",
    "TranslatorConfig",
    "make_translator",
    "namespaced",
    "SKIP_INJECTION",
    "SkipInjection",
    "normalize_url_path",
    "match_route_pattern",
    "select_namespaces",
    "extract_namespaces",
    "build_client_payload",
    "serialize_client_payload",
    "inject_client_translations",
    "translator_from_payload",
    "bind_i18n_context",
    "get_i18n_context",
    "use_translation",
    "use_locale",
    "I18nError",
    "TranslationContextError",
    "LocaleResolver",
    "I18nService",
    "create_i18n_options",
    "create_i18n_service",
    "I18nMiddleware",
]
