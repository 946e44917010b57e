"""Tests for infrastructure.i18n.middleware module."""

from unittest.mock import patch

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.testclient import TestClient

from infrastructure.i18n import (
    FallbackOptions,
    FallbackPolicy,
    I18nMiddleware,
    I18nService,
    use_locale,
    use_translation,
)
from infrastructure.logging import get_correlation_id
from tests.factories.i18n import make_client_load_config, make_i18n_options

PAGE = "<html><head><title>Page</title></head><body>{text}</body></html>"


def make_app(service: I18nService) -> FastAPI:
    app = FastAPI()
    app.add_middleware(I18nMiddleware, service=service)

    @app.get("/state")
    @app.get("/{locale}/state")
    async def state(request: Request):
        return {
            "locale": getattr(request.state, "locale", None),
            "path": getattr(request.state, "path", None),
            "hello": request.state.t("common.hello") if hasattr(request.state, "t") else None,
            "fallback_keys": sorted(getattr(request.state, "fallback_keys", [])),
        }

    @app.get("/context")
    @app.get("/{locale}/context")
    async def context():
        return {
            "locale": use_locale(),
            "hello": use_translation()("common.hello"),
            "correlation_id": get_correlation_id(),
        }

    @app.get("/page", response_class=HTMLResponse)
    @app.get("/{locale}/page", response_class=HTMLResponse)
    @app.get("/{locale}/dashboard/{item}", response_class=HTMLResponse)
    async def page(request: Request):
        return HTMLResponse(PAGE.format(text=request.state.t("common.hello")))

    return app


@pytest.fixture
def client(i18n_service):
    return TestClient(make_app(i18n_service))


@pytest.fixture
def client_load_service(locales_dir):
    return I18nService(
        make_i18n_options(
            locales_dir,
            fallback=FallbackOptions(enabled=True),
            client_load=make_client_load_config(
                always=["common"],
                routes={"/dashboard/*": ["features.dashboard"]},
                fallback=FallbackPolicy.NONE,
            ),
        )
    )


@pytest.mark.unit
class TestI18nMiddlewareState:
    """Tests for request state populated by I18nMiddleware."""

    def test_locale_from_path(self, client):
        """The locale segment sets the locale and is stripped from the path."""
        data = client.get("/es/state").json()

        assert data["locale"] == "es"
        assert data["path"] == "/state"
        assert data["hello"] == "Hola"
        assert data["fallback_keys"] == [
            "common.actions.cancel",
            "common.goodbye",
            "features.dashboard.stats.users",
        ]

    def test_locale_from_header(self, client):
        """Accept-Language is used when the path has no locale."""
        data = client.get("/state", headers={"Accept-Language": "es-MX,en;q=0.5"}).json()

        assert data["locale"] == "es"
        assert data["path"] == "/state"

    def test_default_locale(self, client):
        """The default language is used when nothing matches."""
        data = client.get("/state", headers={"Accept-Language": "fr"}).json()

        assert data["locale"] == "en"
        assert data["hello"] == "Hello"
        assert data["fallback_keys"] == []

    def test_context_bound_during_request(self, client):
        """Translation and logging context are available to handlers."""
        data = client.get("/es/context").json()

        assert data["locale"] == "es"
        assert data["hello"] == "Hola"
        assert data["correlation_id"] is not None

    def test_incoming_correlation_id_is_used(self, client):
        """An X-Correlation-ID header is carried into the logging context."""
        data = client.get("/es/context", headers={"X-Correlation-ID": "req-42"}).json()

        assert data["correlation_id"] == "req-42"

    @patch("infrastructure.i18n.middleware.logger")
    def test_missing_locales_directory_passes_through(self, mock_logger, tmp_path):
        """Requests pass through untouched when the locales directory is missing."""
        service = I18nService(make_i18n_options(tmp_path / "missing"))
        client = TestClient(make_app(service))

        response = client.get("/es/state")

        assert response.status_code == 200
        assert response.json()["locale"] is None
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args[0][0] == "locales_directory_missing"


@pytest.mark.unit
class TestI18nMiddlewareInjection:
    """Tests for client translation injection."""

    def test_no_injection_without_client_load(self, client):
        """Pages are unchanged when client loading is not configured."""
        response = client.get("/es/page")

        assert response.text == PAGE.format(text="Hola")

    def test_injects_selected_namespaces(self, client_load_service):
        """Matching routes ship always plus route namespaces."""
        client = TestClient(make_app(client_load_service))

        response = client.get("/es/dashboard/7")

        assert response.status_code == 200
        assert "window.__I18N__=" in response.text
        assert '"features.dashboard.title": "Panel"' in response.text
        assert '"common.hello": "Hola"' in response.text
        assert '"common.actions.save": "Guardar"' in response.text
        assert '"locale": "es"' in response.text
        assert '"defaultLocale": "en"' in response.text
        assert response.text.index("window.__I18N__") < response.text.index("</head>")

    def test_content_length_is_recomputed(self, client_load_service):
        """The injected response reports its new length."""
        client = TestClient(make_app(client_load_service))

        response = client.get("/es/dashboard/7")

        assert response.headers["content-length"] == str(len(response.content))
        assert response.headers["content-type"].startswith("text/html")

    def test_skip_injection(self, client_load_service):
        """Unmatched routes under the none policy are left untouched."""
        client = TestClient(make_app(client_load_service))

        response = client.get("/es/page")

        assert response.text == PAGE.format(text="Hola")

    def test_json_responses_are_not_injected(self, client_load_service):
        """Only HTML responses receive client translations."""
        client = TestClient(make_app(client_load_service))

        response = client.get("/es/state")

        assert "window.__I18N__" not in response.text
        assert response.json()["locale"] == "es"

    def test_latin1_page_is_injected(self, client_load_service):
        """The charset declared by the response is used for the page body."""
        body = "<html><head></head><body>caf\xe9</body></html>".encode("latin-1")
        app = FastAPI()
        app.add_middleware(I18nMiddleware, service=client_load_service)

        @app.get("/{locale}/dashboard/legacy")
        async def legacy():
            return Response(body, media_type="text/html; charset=latin-1")

        response = TestClient(app).get("/es/dashboard/legacy")

        assert response.status_code == 200
        assert b"window.__I18N__=" in response.content
        assert "caf\xe9".encode("latin-1") in response.content
        assert response.headers["content-length"] == str(len(response.content))

    @patch("infrastructure.i18n.middleware.logger")
    def test_undecodable_page_is_left_unchanged(self, mock_logger, client_load_service):
        """A body that does not match its charset is served untouched."""
        body = b"<html><head></head><body>caf\xe9</body></html>"
        app = FastAPI()
        app.add_middleware(I18nMiddleware, service=client_load_service)

        @app.get("/{locale}/dashboard/legacy")
        async def legacy():
            return Response(body, media_type="text/html; charset=utf-8")

        response = TestClient(app).get("/es/dashboard/legacy")

        assert response.status_code == 200
        assert response.content == body
        assert response.headers["content-length"] == str(len(body))
        mock_logger.warning.assert_called_once()
        assert (
            mock_logger.warning.call_args[0][0]
            == "client_translations_injection_skipped"
        )
