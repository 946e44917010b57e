"""Translation lookup over a merged, flat translation table.

``make_translator`` returns the ``t(key)`` callable used while rendering:

- development: missing keys render as ``"[key]"`` and are logged
- production: missing keys render as ``""`` (or ``"[key]"`` with
  ``show_keys_in_prod``), and fallback values may carry an indicator
"""

from dataclasses import dataclass
from typing import AbstractSet, Any, Callable, Mapping, Optional

from infrastructure.i18n.models import IndicatorFormat, IndicatorPredicate, Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()


@dataclass(frozen=True)
class TranslatorConfig:
    """Behavior configuration for a translator.

    Attributes:
        locale: Current locale code (included in diagnostics).
        default_locale: Locale fallback values come from.
        show_keys_in_prod: Render "[key]" instead of "" for unresolved keys
            under production behavior.
        show_fallback_indicator: Decorate fallback values under production behavior.
        fallback_indicator_format: Formats (text, default_locale).
        should_show_fallback_indicator: Optional (text, default_locale) predicate.
        apply_fallback_on_dev: Use production behavior in development too.
        is_production: Production check, evaluated once when the translator
            is created. Development is assumed when unset.
    """

    locale: Optional[str] = None
    default_locale: Optional[str] = None
    show_keys_in_prod: bool = False
    show_fallback_indicator: bool = False
    fallback_indicator_format: Optional[IndicatorFormat] = None
    should_show_fallback_indicator: Optional[IndicatorPredicate] = None
    apply_fallback_on_dev: bool = False
    is_production: Optional[Callable[[], bool]] = None


def make_translator(
    translation_data: Mapping[str, Any],
    fallback_keys: AbstractSet[str] = frozenset(),
    config: Optional[TranslatorConfig] = None,
) -> Translator:
    """Create a translator for a flat, dot-keyed translation table.

    Args:
        translation_data: Flat translation table (e.g. {"common.save": "Save"}).
        fallback_keys: Keys whose value came from the default locale.
        config: Behavior configuration (defaults to development behavior).

    Returns:
        A function mapping a translation key to display text. It never raises.

    Example:
        t = make_translator({"common.hello": "Hola"}, config=TranslatorConfig(locale="es"))
        t("common.hello")  # "Hola"
        t("common.bye")    # "[common.bye]" in development
    """
    config = config or TranslatorConfig()
    is_prod = config.is_production() if config.is_production else False
    use_production_behavior = is_prod or config.apply_fallback_on_dev

    def unresolved(key: str, event: str, **context: Any) -> str:
        if not use_production_behavior:
            logger.warning(event, key=key, locale=config.locale, **context)
            return f"[{key}]"
        return f"[{key}]" if config.show_keys_in_prod else ""

    def translate(key: str) -> str:
        if key not in translation_data:
            return unresolved(key, "translation_key_missing")

        value = translation_data[key]
        if not isinstance(value, str):
            return unresolved(
                key,
                "translation_value_not_string",
                value_type=type(value).__name__,
            )

        if (
            use_production_behavior
            and config.show_fallback_indicator
            and key in fallback_keys
            and config.default_locale
            and config.fallback_indicator_format
        ):
            should_show = config.should_show_fallback_indicator
            if should_show is None or should_show(value, config.default_locale):
                return config.fallback_indicator_format(value, config.default_locale)

        return value

    return translate


def namespaced(translate: Translator, prefix: str) -> Translator:
    """Scope a translator to a key prefix.

    Namespaced translators compose: ``namespaced(namespaced(t, "a"), "b")``
    behaves like ``namespaced(t, "a.b")``. An empty sub-key resolves the
    prefix itself. Unresolved keys are reported with the full key.

    Args:
        translate: Translator to delegate to.
        prefix: Key prefix (e.g. "common.actions").

    Returns:
        Translator taking keys relative to ``prefix``.

    Example:
        t_actions = namespaced(t, "common.actions")
        t_actions("save")  # t("common.actions.save")
    """

    def translate_namespaced(sub_key: str) -> str:
        return translate(f"{prefix}.{sub_key}" if sub_key else prefix)

    return translate_namespaced
