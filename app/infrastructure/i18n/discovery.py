"""Discovery of translation source files inside a locale directory.

Builds namespaces from folder/file paths relative to the locale root:

    locales/en/common.json                       -> "common"
    locales/en/common/actions.json               -> "common.actions"
    locales/en/features/navigator/dashboard.json -> "features.navigator.dashboard"
    locales/en/pdi-modals.json                   -> "pdiModals"
"""

import re
from pathlib import Path, PurePath
from typing import Dict, Optional

from infrastructure.logging import get_module_logger

logger = get_module_logger()

SOURCE_EXTENSIONS = frozenset({".json", ".yml", ".yaml"})

_WORD_SEPARATOR = re.compile(r"[-_]([A-Za-z])")


def to_camel_case(segment: str) -> str:
    """Convert kebab-case or snake_case to camelCase.

    Only a separator followed by a letter is rewritten; everything else is
    preserved.

    Args:
        segment: A single path segment without extension.

    Returns:
        The camelCased segment (e.g. "user_settings" -> "userSettings").
    """
    return _WORD_SEPARATOR.sub(lambda match: match.group(1).upper(), segment)


def namespace_for(relative_path: PurePath) -> str:
    """Build the namespace for a source file path relative to a locale root.

    Args:
        relative_path: e.g. PurePath("features/navigator/dashboard.json").

    Returns:
        Dot-joined camelCased namespace (e.g. "features.navigator.dashboard").
    """
    parts = relative_path.parent.parts + (relative_path.stem,)
    return ".".join(to_camel_case(part) for part in parts)


def is_translation_source(path: Path) -> bool:
    """Check whether a file is a translation source by its extension."""
    return path.suffix in SOURCE_EXTENSIONS


def discover_translation_files(
    locale_dir: Path,
    base_path: Optional[Path] = None,
) -> Dict[str, Path]:
    """Recursively discover translation source files in a locale directory.

    Entries are visited in lexicographic order by name. When two files map to
    the same namespace (e.g. "user-settings.json" and "user_settings.json"),
    the one visited last wins.

    An unreadable or missing directory yields an empty mapping and is logged;
    it never raises.

    Args:
        locale_dir: The directory to scan (e.g. Path("locales/en")).
        base_path: Locale root used for relative paths; defaults to locale_dir.

    Returns:
        Mapping of namespace -> source file path, in traversal order.
    """
    locale_dir = Path(locale_dir)
    base_path = base_path or locale_dir
    files: Dict[str, Path] = {}

    try:
        entries = sorted(locale_dir.iterdir(), key=lambda entry: entry.name)
    except OSError as e:
        logger.error(
            "translation_discovery_failed",
            directory=str(locale_dir),
            error=str(e),
        )
        return files

    for entry in entries:
        if entry.is_file() and is_translation_source(entry):
            files[namespace_for(entry.relative_to(base_path))] = entry
        elif entry.is_dir():
            files.update(discover_translation_files(entry, base_path))

    return files
