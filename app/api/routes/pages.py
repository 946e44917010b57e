"""Server-rendered demo page for nested translations.

Renders translated content for "/test" and "/{locale}/test" using the request
translator attached by I18nMiddleware. Client translations selected for the
route are injected into the page by the middleware.
"""

from html import escape

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from infrastructure.i18n import namespaced
from infrastructure.services import TranslatorDep

router = APIRouter(tags=["Pages"])


PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="{locale}">
<head>
    <meta charset="UTF-8">
    <title>{title}</title>
    <style>
        body {{ font-family: sans-serif; padding: 40px; max-width: 800px; margin: 0 auto; }}
        .test-section {{ background: #f5f5f5; padding: 20px; margin: 20px 0; border-radius: 8px; }}
        .test-key {{ font-family: monospace; background: #e0e0e0; padding: 2px 6px; border-radius: 3px; }}
        .test-result {{ color: #0066cc; font-weight: bold; }}
    </style>
</head>
<body>
    <h1>{title}</h1>
    <p>Current locale: <strong>{locale}</strong></p>
{sections}
    <div class="test-section">
        <p><a href="/en/test">English</a> | <a href="/es/test">Español</a></p>
    </div>
</body>
</html>
"""

SECTIONS = {
    "common.actions": ("save", "cancel", "edit"),
    "common.states": ("loading", "success"),
    "features.dashboard": ("title", "welcomeMessage", "stats.users"),
    "common": ("welcome", "hello"),
}


def render_section(t, prefix, keys):
    translate = namespaced(t, prefix)
    rows = "\n".join(
        f'        <p><code class="test-key">{escape(prefix)}.{escape(key)}</code> '
        f'<span class="test-result">{escape(translate(key))}</span></p>'
        for key in keys
    )
    return f'    <div class="test-section">\n        <h2>{escape(prefix)}</h2>\n{rows}\n    </div>'


def render_test_page(t, locale: str) -> str:
    sections = "\n".join(
        render_section(t, prefix, keys) for prefix, keys in SECTIONS.items()
    )
    return PAGE_TEMPLATE.format(
        locale=escape(locale),
        title=escape(t("features.dashboard.title")),
        sections=sections,
    )


@router.get("/test", response_class=HTMLResponse)
@router.get("/{locale}/test", response_class=HTMLResponse)
async def test_page(request: Request, t: TranslatorDep):
    """
    Nested translation demo page.

    Returns:
        HTMLResponse: Page rendered in the negotiated locale.
    """
    locale = getattr(request.state, "locale", "")
    return HTMLResponse(content=render_test_page(t, locale))
