"""Tests for API dependencies."""

import pytest
from starlette.requests import Request

from notion_gateway.api.deps import get_credential, get_request_origin
from notion_gateway.config import Settings
from notion_gateway.errors import ConfigurationError


def _request(headers: dict[str, str], scheme: str = "http") -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/",
            "query_string": b"",
            "scheme": scheme,
            "server": ("127.0.0.1", 8000),
            "headers": [(k.lower().encode(), v.encode()) for k, v in headers.items()],
        }
    )


class TestRequestOrigin:
    def test_uses_host_header(self) -> None:
        assert get_request_origin(_request({"Host": "localhost:8787"})) == "http://localhost:8787"

    def test_keeps_request_scheme(self) -> None:
        request = _request({"Host": "gw.example.com"}, scheme="https")
        assert get_request_origin(request) == "https://gw.example.com"

    def test_prefers_forwarded_headers(self) -> None:
        request = _request(
            {
                "Host": "10.0.0.5:8000",
                "X-Forwarded-Proto": "https, http",
                "X-Forwarded-Host": "gw.example.com, proxy.internal",
            }
        )
        assert get_request_origin(request) == "https://gw.example.com"

    def test_falls_back_to_server_address(self) -> None:
        assert get_request_origin(_request({})) == "http://127.0.0.1:8000"


class TestCredential:
    async def test_returns_configured_key(self) -> None:
        settings = Settings(notion_key="secret_abc", _env_file=None)
        assert await get_credential(settings) == "secret_abc"

    async def test_missing_key_raises(self) -> None:
        settings = Settings(notion_key=None, _env_file=None)
        with pytest.raises(ConfigurationError, match="NOTION_KEY"):
            await get_credential(settings)
