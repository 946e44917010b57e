"""Translation loading interface and implementations.

Defines the contract for producing flat (key, value) translation entries from
a locale root and provides the file-based loader reading JSON and YAML
sources.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Tuple

import yaml

from infrastructure.i18n.discovery import discover_translation_files
from infrastructure.i18n.models import ObjectBranch, StringLeaf, classify_node
from infrastructure.logging import get_module_logger

logger = get_module_logger()

TranslationEntry = Tuple[str, str]


def parse_source(text: str, suffix: str) -> Any:
    """Parse raw source text into a document tree.

    Blank input parses to an empty document.

    Args:
        text: Raw UTF-8 decoded file content.
        suffix: File extension selecting the parser (".json", ".yml", ".yaml").

    Returns:
        Parsed document (usually a dict).

    Raises:
        ValueError: If JSON is invalid.
        yaml.YAMLError: If YAML is invalid.
    """
    if not text.strip():
        return {}
    if suffix == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def read_source_document(path: Path) -> Dict[str, Any]:
    """Read and parse one translation source file.

    Unreadable, unparsable or non-object documents are treated as empty and
    logged; this never raises.

    Args:
        path: Source file path.

    Returns:
        Parsed top-level object, or an empty dict.
    """
    try:
        data = parse_source(path.read_text(encoding="utf-8"), path.suffix)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.warning("translation_source_unreadable", file=str(path), error=str(e))
        return {}

    if data is None:
        return {}

    if not isinstance(data, dict):
        logger.warning(
            "translation_source_invalid",
            file=str(path),
            expected="object",
            got=type(data).__name__,
        )
        return {}

    return data


def flatten_document(document: Mapping[Any, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten a nested document into dot-joined keys.

    Only string leaves are kept; numbers, booleans, lists and nulls are
    dropped and can never be resolved.

    Args:
        document: Nested mapping with string leaves.
        prefix: Key prefix (including trailing dot) used during recursion.

    Returns:
        Mapping of flattened path -> string value.

    Example:
        flatten_document({"actions": {"save": "Save"}, "count": 3})
        # {"actions.save": "Save"}
    """
    flattened: Dict[str, str] = {}

    for key, node in ObjectBranch(document).nodes():
        match node:
            case ObjectBranch():
                flattened.update(flatten_document(node.children, f"{prefix}{key}."))
            case StringLeaf(value=value):
                flattened[f"{prefix}{key}"] = value

    return flattened


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations turn a locale root into flat (translation key, value)
    entries in a stable order. Later entries override earlier ones.
    """

    @abstractmethod
    def entries(self, locale_dir: Path) -> Iterator[TranslationEntry]:
        """Yield namespaced translation entries for one locale.

        Args:
            locale_dir: Locale root directory (e.g. Path("locales/es")).

        Yields:
            ("namespace.flat.key", value) pairs.
        """


class FileTranslationLoader(TranslationLoader):
    """Loader for JSON/YAML translation files on disk.

    Discovers every source below the locale root, flattens each document and
    prefixes its keys with the file's namespace. Nothing is cached: each call
    reads the current files.
    """

    def entries(self, locale_dir: Path) -> Iterator[TranslationEntry]:
        """Yield namespaced translation entries for one locale.

        Args:
            locale_dir: Locale root directory.

        Yields:
            ("namespace.flat.key", value) pairs in discovery order.
        """
        for namespace, path in discover_translation_files(Path(locale_dir)).items():
            for flat_key, value in flatten_document(read_source_document(path)).items():
                yield f"{namespace}.{flat_key}", value
