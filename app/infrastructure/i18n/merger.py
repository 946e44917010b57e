"""Locale overlay merging with fallback provenance tracking.

The default locale is written first, then the active locale overwrites it.
Keys that only the default locale defines are recorded as fallback keys.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Optional, Set

from infrastructure.i18n.loader import (
    FileTranslationLoader,
    TranslationEntry,
    TranslationLoader,
)
from infrastructure.i18n.models import MergedTranslations
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def fold_translations(
    default_entries: Optional[Iterable[TranslationEntry]],
    active_entries: Iterable[TranslationEntry],
    track_fallbacks: bool,
) -> MergedTranslations:
    """Overlay active-locale entries on top of default-locale entries.

    The default entries are consumed completely before the active entries.

    Args:
        default_entries: Entries of the default locale, or None for no overlay.
        active_entries: Entries of the requested locale.
        track_fallbacks: Record which keys come from the default locale.

    Returns:
        MergedTranslations with a read-only table and frozen fallback keys.
    """
    table: Dict[str, str] = {}
    fallback_keys: Set[str] = set()

    for key, value in default_entries or ():
        if track_fallbacks and key not in table:
            fallback_keys.add(key)
        table[key] = value

    for key, value in active_entries:
        existed = key in table
        table[key] = value
        if track_fallbacks and existed:
            fallback_keys.discard(key)

    return MergedTranslations(
        table=MappingProxyType(table),
        fallback_keys=frozenset(fallback_keys),
    )


def merge_locales(
    active_root: Path,
    default_root: Optional[Path],
    fallback_enabled: bool,
    loader: Optional[TranslationLoader] = None,
) -> MergedTranslations:
    """Build the merged translation table for one request.

    The default locale is only overlaid when fallback is enabled, a default
    root is given, and it differs from the active root.

    Args:
        active_root: Locale root of the requested locale.
        default_root: Locale root of the default locale, or None.
        fallback_enabled: Whether to overlay and track the default locale.
        loader: Source of entries (defaults to FileTranslationLoader).

    Returns:
        MergedTranslations for the active locale.
    """
    loader = loader or FileTranslationLoader()
    overlay_default = (
        fallback_enabled
        and default_root is not None
        and Path(default_root) != Path(active_root)
    )

    merged = fold_translations(
        loader.entries(Path(default_root)) if overlay_default else None,
        loader.entries(Path(active_root)),
        track_fallbacks=fallback_enabled,
    )

    logger.debug(
        "merged_locale_translations",
        active_root=str(active_root),
        default_root=str(default_root) if overlay_default else None,
        key_count=len(merged.table),
        fallback_count=len(merged.fallback_keys),
    )
    return merged


def build_locale_translations(
    locales_dir: Path,
    locale: str,
    default_locale: str,
    fallback_enabled: bool,
    loader: Optional[TranslationLoader] = None,
) -> MergedTranslations:
    """Build the merged table for a locale under a locales directory.

    Args:
        locales_dir: Directory containing one folder per language.
        locale: Active language code.
        default_locale: Default language code.
        fallback_enabled: Whether to overlay the default language.
        loader: Source of entries (defaults to FileTranslationLoader).

    Returns:
        MergedTranslations for ``locale``.
    """
    locales_dir = Path(locales_dir)
    default_root = locales_dir / default_locale if locale != default_locale else None
    return merge_locales(
        locales_dir / locale,
        default_root,
        fallback_enabled,
        loader=loader,
    )
