"""Route-driven selection of the translation namespaces shipped to the client.

Route patterns are path prefixes with an optional trailing ``*`` wildcard:

    match_route_pattern("/indicators/123", "/indicators/*")         # True
    match_route_pattern("/indicators/123/edit", "/indicators/*")    # True
    match_route_pattern("/indicators", "/indicators/*")             # True
    match_route_pattern("/matrix/indicators/456", "/indicators/*")  # False
"""

from enum import Enum
from typing import List, Mapping, Sequence, TypeVar, Union

from infrastructure.i18n.models import ClientLoadConfig, FallbackPolicy
from infrastructure.logging import get_module_logger

logger = get_module_logger()

WILDCARD = "*"

V = TypeVar("V")


class SkipInjection(Enum):
    """Sentinel type: ship no translations at all for this request."""

    SKIP = "__SKIP_INJECTION__"


SKIP_INJECTION = SkipInjection.SKIP


def normalize_url_path(path: str) -> str:
    """Remove a single trailing slash, except for the root path "/"."""
    if path == "/" or not path.endswith("/"):
        return path
    return path[:-1]


def match_route_pattern(url_path: str, pattern: str) -> bool:
    """Match a URL path against a route pattern.

    Exact matches always match. A wildcard pattern matches every path that
    starts with the text before the wildcard, and also the bare directory path
    (the prefix without its trailing slash). Patterns without a wildcard only
    match exactly.

    Args:
        url_path: The URL path (e.g. "/indicators/123/edit").
        pattern: The route pattern (e.g. "/indicators/*").

    Returns:
        True if the URL matches the pattern.
    """
    if url_path == pattern:
        return True

    if WILDCARD not in pattern:
        return False

    prefix = pattern[: pattern.index(WILDCARD)]
    if url_path.startswith(prefix):
        return True

    # "/indicators" matches "/indicators/*"
    return prefix.endswith("/") and url_path == prefix[:-1]


def select_namespaces(
    path: str,
    config: ClientLoadConfig,
    is_dev: bool,
) -> Union[List[str], SkipInjection]:
    """Determine which namespace prefixes to ship for a request path.

    Every matching route pattern contributes its namespaces, appended to
    ``config.always`` in route order (duplicates are kept). When nothing
    matches, ``config.fallback`` decides:

    - ``all``: returns ``[]``, meaning "extract everything"
    - ``none``: returns SKIP_INJECTION, meaning "ship nothing"
    - ``always-only``: returns ``config.always``

    Args:
        path: The request path, without locale prefix.
        config: Client-load configuration.
        is_dev: Whether overlap diagnostics should be emitted.

    Returns:
        Namespace prefixes, or SKIP_INJECTION.
    """
    if config.ignore_trailing_slash:
        path_to_match = normalize_url_path(path)
    else:
        path_to_match = path

    namespaces: List[str] = list(config.always)
    matched_patterns: List[str] = []

    for pattern, pattern_namespaces in config.routes.items():
        if config.ignore_trailing_slash:
            pattern_to_match = normalize_url_path(pattern)
        else:
            pattern_to_match = pattern

        if match_route_pattern(path_to_match, pattern_to_match):
            namespaces.extend(pattern_namespaces)
            matched_patterns.append(pattern)

    if is_dev and config.warn_on_overlap and len(matched_patterns) > 1:
        logger.warning(
            "client_load_routes_overlap",
            path=path,
            patterns=matched_patterns,
        )

    if not matched_patterns:
        if config.fallback == FallbackPolicy.ALL:
            return []
        if config.fallback == FallbackPolicy.NONE:
            return SKIP_INJECTION

    return namespaces


def extract_namespaces(
    translations: Mapping[str, V],
    namespaces: Sequence[str],
) -> Mapping[str, V]:
    """Extract the entries belonging to the given namespace prefixes.

    A key belongs to a prefix when it equals the prefix or starts with
    ``prefix + "."`` ("common" selects "common.save" but not "commonly.x").

    Args:
        translations: Flat translation table.
        namespaces: Namespace prefixes. Empty means "everything".

    Returns:
        The full table unchanged when ``namespaces`` is empty, otherwise a new
        dict with the matching entries in table order.
    """
    if not namespaces:
        return translations

    exact = frozenset(namespaces)
    dotted = tuple(f"{namespace}." for namespace in exact)

    return {
        key: value
        for key, value in translations.items()
        if key in exact or key.startswith(dotted)
    }
