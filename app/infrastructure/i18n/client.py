"""Client-side translation payload.

Translations selected for a page are embedded into the HTML response as

    <script>window.__I18N__={"translations": {...}, "locale": "es", "defaultLocale": "en"};</script>

so the browser can resolve keys without another request.
"""

import json
import re
from typing import Any, Dict, Mapping, Optional

from infrastructure.i18n.models import Translator
from infrastructure.i18n.translator import TranslatorConfig, make_translator

CLIENT_GLOBAL = "window.__I18N__"

_HEAD_CLOSE = "</head>"
_BODY_OPEN = re.compile(r"<body[^>]*>", re.IGNORECASE)


def build_client_payload(
    translations: Mapping[str, Any],
    locale: str,
    default_locale: str,
) -> Dict[str, Any]:
    """Build the payload shipped to the client.

    Args:
        translations: Flat translation sub-table for the page.
        locale: Current locale.
        default_locale: Default locale.

    Returns:
        {"translations": ..., "locale": ..., "defaultLocale": ...}
    """
    return {
        "translations": dict(translations),
        "locale": locale,
        "defaultLocale": default_locale,
    }


def serialize_client_payload(payload: Mapping[str, Any]) -> str:
    """Serialize a payload for embedding in a script tag.

    "<" and ">" are written as JSON unicode escapes so the payload can never
    close the surrounding script element.
    """
    encoded = json.dumps(payload, ensure_ascii=False)
    return encoded.replace("<", "\\u003c").replace(">", "\\u003e")


def client_script_tag(payload: Mapping[str, Any]) -> str:
    """Render the inline script assigning the payload to the client global."""
    return f"<script>{CLIENT_GLOBAL}={serialize_client_payload(payload)};</script>"


def inject_client_translations(
    html: str,
    translations: Mapping[str, Any],
    locale: str,
    default_locale: str,
) -> str:
    """Embed client translations into an HTML document.

    The script is inserted before the first "</head>", otherwise right after
    the first "<body ...>" tag, otherwise at the start of the document.

    Args:
        html: Rendered HTML.
        translations: Flat translation sub-table for the page.
        locale: Current locale.
        default_locale: Default locale.

    Returns:
        HTML with the translation script.
    """
    script = client_script_tag(build_client_payload(translations, locale, default_locale))

    head_index = html.find(_HEAD_CLOSE)
    if head_index != -1:
        return html[:head_index] + script + html[head_index:]

    body_match = _BODY_OPEN.search(html)
    if body_match:
        return html[: body_match.end()] + script + html[body_match.end() :]

    return script + html


def translator_from_payload(
    payload: Mapping[str, Any],
    is_production: Optional[bool] = None,
) -> Translator:
    """Rebuild a translator from a decoded client payload.

    Args:
        payload: Decoded ``window.__I18N__`` value.
        is_production: Use production resolution behavior.

    Returns:
        Translator over the shipped translations.
    """
    return make_translator(
        payload.get("translations") or {},
        config=TranslatorConfig(
            locale=payload.get("locale"),
            default_locale=payload.get("defaultLocale"),
            is_production=(lambda: bool(is_production)) if is_production is not None else None,
        ),
    )
