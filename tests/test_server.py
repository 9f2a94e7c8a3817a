"""Tests for the application factory, health endpoints and error shapes."""

from fastapi.testclient import TestClient

from notion_gateway import __version__
from notion_gateway.config import Settings
from notion_gateway.mcp.tool_defs import TOOL_DEFINITIONS
from notion_gateway.server import _filter_sentry_event, create_app


class TestHealth:
    def test_health(self, client) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == __version__
        assert body["timestamp"]

    def test_root_lists_tools(self, client) -> None:
        body = client.get("/").json()
        assert body["sse"] == "/sse"
        assert body["messages"] == "/messages"
        assert body["tools"] == [d["name"] for d in TOOL_DEFINITIONS]


class TestMiddleware:
    def test_security_headers(self, client) -> None:
        response = client.get("/health")
        assert response.headers["x-request-id"]
        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.headers["x-frame-options"] == "DENY"

    def test_request_ids_are_unique(self, client) -> None:
        first = client.get("/health").headers["x-request-id"]
        second = client.get("/health").headers["x-request-id"]
        assert first != second

    def test_no_hsts_in_debug(self, client) -> None:
        assert "strict-transport-security" not in client.get("/health").headers

    def test_hsts_outside_debug(self, executor) -> None:
        settings = Settings(notion_key="k", debug=False, _env_file=None)
        with TestClient(create_app(settings=settings, executor=executor)) as client:
            response = client.get("/health")
        assert response.headers["strict-transport-security"].startswith("max-age=")


class TestErrorShapes:
    def test_unknown_route(self, client) -> None:
        response = client.get("/does-not-exist")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_builtin_docs_disabled(self, client) -> None:
        assert client.get("/docs").status_code == 404


class TestAppFactory:
    def test_state_is_shared(self, app, executor) -> None:
        assert app.state.executor is executor
        assert app.state.dispatcher.registry is app.state.registry
        assert len(app.state.registry) == len(TOOL_DEFINITIONS)

    def test_lifespan_runs_without_credential(self, executor) -> None:
        settings = Settings(notion_key=None, debug=True, _env_file=None)
        with TestClient(create_app(settings=settings, executor=executor)) as client:
            assert client.get("/health").status_code == 200


class TestSentryFilter:
    def test_redacts_authorization(self) -> None:
        event = {"request": {"headers": {"authorization": "Bearer secret", "accept": "*/*"}}}
        filtered = _filter_sentry_event(event)
        assert filtered["request"]["headers"]["authorization"] == "[REDACTED]"
        assert filtered["request"]["headers"]["accept"] == "*/*"

    def test_event_without_request(self) -> None:
        assert _filter_sentry_event({"message": "x"}) == {"message": "x"}
