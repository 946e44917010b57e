"""Translation models for i18n system.

Defines the node variant used while flattening source documents, the
per-request merged translation data, and the runtime options consumed by the
service and middleware.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, FrozenSet, Iterator, Mapping, Optional, Tuple, Union

from infrastructure.configuration.infrastructure.i18n import (
    ClientLoadConfig,
    FallbackPolicy,
)

Translator = Callable[[str], str]
IndicatorFormat = Callable[[str, str], str]
IndicatorPredicate = Callable[[str, str], bool]


def default_indicator_format(text: str, default_locale: str) -> str:
    """Default fallback indicator: ``"Hello [en]"``."""
    return f"{text} [{default_locale}]"


@dataclass(frozen=True)
class StringLeaf:
    """A string value reached inside a source document."""

    value: str


@dataclass(frozen=True)
class ObjectBranch:
    """A nested object inside a source document.

    Attributes:
        children: Raw child values keyed by object key.
    """

    children: Mapping[Any, Any]

    def nodes(self) -> Iterator[Tuple[str, "SourceNode"]]:
        """Yield (key, classified child) pairs in document order."""
        for key, value in self.children.items():
            yield str(key), classify_node(value)


@dataclass(frozen=True)
class OtherLeaf:
    """Any value that is neither a string nor an object (number, bool, list, null)."""

    value: Any


SourceNode = Union[StringLeaf, ObjectBranch, OtherLeaf]


def classify_node(value: Any) -> SourceNode:
    """Tag a parsed document value with its node kind.

    Args:
        value: A value produced by the JSON/YAML parser.

    Returns:
        StringLeaf, ObjectBranch or OtherLeaf.
    """
    if isinstance(value, str):
        return StringLeaf(value)
    if isinstance(value, Mapping):
        return ObjectBranch(value)
    return OtherLeaf(value)


@dataclass(frozen=True)
class MergedTranslations:
    """Flat translation table for one request plus fallback provenance.

    Attributes:
        table: Translation key -> string value. Read-only.
        fallback_keys: Keys whose value came from the default locale.
    """

    table: Mapping[str, str]
    fallback_keys: FrozenSet[str] = frozenset()


class LocaleSource(str, Enum):
    """Where a request's locale was taken from."""

    PATH = "path"
    HEADER = "header"
    DEFAULT = "default"


@dataclass(frozen=True)
class ResolvedLocale:
    """Outcome of locale negotiation for a request.

    Attributes:
        locale: Negotiated language code (always a supported one).
        root_path: Request path with the locale segment removed.
        source: Where the locale came from.
    """

    locale: str
    root_path: str
    source: LocaleSource


@dataclass(frozen=True)
class I18nContextData:
    """Translation data bound to the request being rendered."""

    translations: Mapping[str, Any]
    locale: str
    default_locale: str


@dataclass(frozen=True)
class FallbackOptions:
    """Fallback behavior for missing translations.

    Attributes:
        enabled: Overlay the default language under the active one.
        show_indicator: Decorate fallback values using indicator_format.
        indicator_format: Formats (text, default_locale) into decorated text.
        should_show_indicator: Optional per-text predicate; the indicator is
            always shown when unset.
        apply_on_dev: Use production resolution behavior in development too.
            When false, development always renders "[key]" for visibility.
    """

    enabled: bool = False
    show_indicator: bool = False
    indicator_format: IndicatorFormat = default_indicator_format
    should_show_indicator: Optional[IndicatorPredicate] = None
    apply_on_dev: bool = False


@dataclass(frozen=True)
class I18nOptions:
    """Runtime options for the i18n service and middleware.

    Attributes:
        languages: Supported language codes (e.g. ("en", "es", "ja")).
        default_language: Language used when no preference matches.
        locales_dir: Directory containing one folder per language.
        is_production: Callable reporting production mode. Development is
            assumed when unset.
        fallback: Fallback configuration.
        show_keys_in_prod: Render "[key]" for missing keys in production.
        client_load: Route-driven client translation delivery, or None.
    """

    languages: Tuple[str, ...]
    default_language: str
    locales_dir: Path
    is_production: Optional[Callable[[], bool]] = None
    fallback: FallbackOptions = field(default_factory=FallbackOptions)
    show_keys_in_prod: bool = False
    client_load: Optional[ClientLoadConfig] = None


__all__ = [
    "ClientLoadConfig",
    "FallbackPolicy",
    "Translator",
    "IndicatorFormat",
    "IndicatorPredicate",
    "default_indicator_format",
    "StringLeaf",
    "ObjectBranch",
    "OtherLeaf",
    "SourceNode",
    "classify_node",
    "MergedTranslations",
    "LocaleSource",
    "ResolvedLocale",
    "I18nContextData",
    "FallbackOptions",
    "I18nOptions",
]
