"""Locale resolution logic for determining the request's language.

Resolution order:
1. Locale path segment (e.g. "/es/dashboard")
2. Accept-Language header
3. Default language
"""

from typing import List, Optional, Sequence, Tuple

from infrastructure.i18n.models import LocaleSource, ResolvedLocale
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LocaleResolver:
    """Resolves the request locale from the URL path and headers.

    Only supported language codes are ever returned; the first supported code
    found in resolution order wins.
    """

    def __init__(self, languages: Sequence[str], default_language: str):
        """Initialize locale resolver.

        Args:
            languages: Supported language codes.
            default_language: Fallback language when no preference matches.
        """
        self.languages = tuple(languages)
        self.default_language = default_language
        self.log = logger.bind(default_locale=default_language)

    def is_supported(self, code: str) -> bool:
        """Check whether a language code is supported."""
        return code in self.languages

    def resolve_from_path(self, path: str) -> Tuple[Optional[str], str]:
        """Resolve the locale from the first path segment.

        Args:
            path: Request path (e.g. "/es/indicators/123/").

        Returns:
            (locale or None, root path). The root path has the locale segment
            and empty segments removed (e.g. "/indicators/123").
        """
        segments = [segment for segment in path.split("/") if segment]

        if segments and self.is_supported(segments[0]):
            return segments[0], "/" + "/".join(segments[1:])

        return None, "/" + "/".join(segments)

    def parse_accept_language(self, accept_language: str) -> List[str]:
        """Parse an Accept-Language header into primary subtags by preference.

        Parses "en-US,en;q=0.9,fr;q=0.8" -> ["en", "en", "fr"]. Entries keep
        their header order when weights are equal.

        Args:
            accept_language: Accept-Language header value.

        Returns:
            Lowercase primary language subtags ordered by weight (descending).
        """
        preferences = []
        for part in accept_language.split(","):
            lang_range = part.split(";")[0].strip()
            if not lang_range:
                continue

            quality = 1.0
            for param in part.split(";")[1:]:
                name, _, value = param.partition("=")
                if name.strip().lower() != "q":
                    continue
                try:
                    quality = float(value.strip())
                except ValueError:
                    quality = 1.0

            preferences.append((lang_range.split("-")[0].lower(), quality))

        return [code for code, _ in sorted(preferences, key=lambda x: x[1], reverse=True)]

    def resolve_from_header(self, accept_language: Optional[str]) -> Optional[str]:
        """Resolve the locale from an Accept-Language header.

        Args:
            accept_language: Accept-Language header value.

        Returns:
            First supported language in preference order, or None.
        """
        if not accept_language:
            return None

        for code in self.parse_accept_language(accept_language):
            if self.is_supported(code):
                return code

        return None

    def resolve(self, path: str, accept_language: Optional[str] = None) -> ResolvedLocale:
        """Resolve the locale for a request.

        Args:
            path: Request path.
            accept_language: Accept-Language header value.

        Returns:
            ResolvedLocale with locale, root path and resolution source.
        """
        path_locale, root_path = self.resolve_from_path(path)

        if path_locale:
            resolved = ResolvedLocale(path_locale, root_path, LocaleSource.PATH)
        else:
            header_locale = self.resolve_from_header(accept_language)
            if header_locale:
                resolved = ResolvedLocale(header_locale, root_path, LocaleSource.HEADER)
            else:
                resolved = ResolvedLocale(
                    self.default_language, root_path, LocaleSource.DEFAULT
                )

        self.log.debug(
            "locale_resolved",
            locale=resolved.locale,
            source=resolved.source.value,
            root_path=resolved.root_path,
        )
        return resolved
