"""Request middleware wiring locale negotiation, translation and client injection."""

from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from infrastructure.i18n.client import inject_client_translations
from infrastructure.i18n.context import bind_i18n_context
from infrastructure.i18n.models import I18nContextData
from infrastructure.i18n.service import I18nService
from infrastructure.logging import bind_request_context, get_module_logger

logger = get_module_logger()

CORRELATION_ID_HEADER = "x-correlation-id"


def is_html_response(response: Response) -> bool:
    return response.headers.get("content-type", "").startswith("text/html")


def declared_charset(response: Response) -> str:
    """Charset from the response content-type, utf-8 when none is declared."""
    for param in response.headers.get("content-type", "").split(";")[1:]:
        name, _, value = param.partition("=")
        if name.strip().lower() == "charset" and value.strip():
            return value.strip().strip('"')
    return "utf-8"


class I18nMiddleware(BaseHTTPMiddleware):
    """Attach translations to each request and embed client translations in HTML.

    Sets on ``request.state``:
        locale: Negotiated language code.
        path: Request path without the locale segment.
        translation_data: Merged flat translation table.
        fallback_keys: Keys served from the default language.
        t: Translator for the request.
    """

    def __init__(self, app, service: I18nService):
        super().__init__(app)
        self.service = service

    async def dispatch(self, request: Request, call_next):
        if not self.service.locales_available():
            logger.error(
                "locales_directory_missing",
                locales_dir=str(self.service.locales_dir),
            )
            return await call_next(request)

        resolved = self.service.resolve_locale(
            request.url.path, request.headers.get("accept-language")
        )
        merged = await run_in_threadpool(
            self.service.build_translations, resolved.locale
        )

        request.state.locale = resolved.locale
        request.state.path = resolved.root_path
        request.state.translation_data = merged.table
        request.state.fallback_keys = merged.fallback_keys
        request.state.t = self.service.create_translator(merged, resolved.locale)

        default_locale = self.service.options.default_language
        client_translations = self.service.client_translations(
            merged, resolved.root_path
        )

        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_ID_HEADER),
            request_path=request.url.path,
            request_method=request.method,
            locale=resolved.locale,
        ), bind_i18n_context(
            I18nContextData(
                translations=merged.table,
                locale=resolved.locale,
                default_locale=default_locale,
            )
        ):
            response = await call_next(request)

        if client_translations is None or not is_html_response(response):
            return response

        body = b"".join([chunk async for chunk in response.body_iterator])
        charset = declared_charset(response)
        try:
            html = inject_client_translations(
                body.decode(charset),
                client_translations,
                resolved.locale,
                default_locale,
            )
            content = html.encode(charset)
        except (UnicodeError, LookupError) as e:
            logger.warning(
                "client_translations_injection_skipped",
                charset=charset,
                error=str(e),
            )
            content = body

        injected = Response(content=content, status_code=response.status_code)
        injected.raw_headers = [
            (name, value)
            for name, value in response.raw_headers
            if name.lower() != b"content-length"
        ] + [(b"content-length", str(len(content)).encode("latin-1"))]
        return injected
