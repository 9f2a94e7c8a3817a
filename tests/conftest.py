"""Shared fixtures: an in-memory Notion backend and a wired-up app."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from notion_gateway.config import Settings
from notion_gateway.engine import BackendExecutor
from notion_gateway.mcp.dispatcher import McpDispatcher
from notion_gateway.mcp.tool_defs import build_registry
from notion_gateway.models import SearchHit
from notion_gateway.server import create_app

TEST_CREDENTIAL = "secret_test_token"


class FakeNotionClient:
    """Stands in for NotionClient; records every operation on its backend."""

    def __init__(self, backend: "FakeNotionBackend", credential: str) -> None:
        self.backend = backend
        self.credential = credential
        self.closed = False

    async def __aenter__(self) -> "FakeNotionClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.closed = True

    async def _call(self, operation: str, *args: Any) -> None:
        self.backend.calls.append((operation, args))
        if self.backend.error is not None:
            raise self.backend.error

    async def search(self, query: str) -> list[SearchHit]:
        await self._call("search", query)
        return list(self.backend.hits)

    async def read_content(self, block_id: str) -> list[str]:
        await self._call("read_content", block_id)
        return list(self.backend.fragments)

    async def create_entry(self, database_id: str, title: str, content: str) -> dict:
        await self._call("create_entry", database_id, title, content)
        return {}

    async def append_content(self, block_id: str, content: str) -> dict:
        await self._call("append_content", block_id, content)
        return {}

    async def add_comment(self, page_id: str, text: str) -> dict:
        await self._call("add_comment", page_id, text)
        return {}

    async def update_property(self, page_id: str, property_name: str, value: str) -> dict:
        await self._call("update_property", page_id, property_name, value)
        return {}

    async def archive(self, page_id: str) -> dict:
        await self._call("archive", page_id)
        return {}


class FakeNotionBackend:
    """Canned responses plus a log of calls and clients handed out."""

    def __init__(self) -> None:
        self.hits: list[SearchHit] = []
        self.fragments: list[str] = []
        self.error: Exception | None = None
        self.calls: list[tuple[str, tuple]] = []
        self.clients: list[FakeNotionClient] = []

    def factory(self, credential: str) -> FakeNotionClient:
        client = FakeNotionClient(self, credential)
        self.clients.append(client)
        return client


@pytest.fixture
def fake_backend() -> FakeNotionBackend:
    return FakeNotionBackend()


@pytest.fixture
def executor(fake_backend: FakeNotionBackend) -> BackendExecutor:
    return BackendExecutor(fake_backend.factory, timeout=5.0)


@pytest.fixture
def registry(executor: BackendExecutor):
    return build_registry(executor)


@pytest.fixture
def dispatcher(registry) -> McpDispatcher:
    return McpDispatcher(registry)


@pytest.fixture
def credential() -> str:
    return TEST_CREDENTIAL


@pytest.fixture
def settings() -> Settings:
    return Settings(notion_key=TEST_CREDENTIAL, keepalive_interval=0.01, debug=True, _env_file=None)


@pytest.fixture
def app(settings: Settings, executor: BackendExecutor):
    return create_app(settings=settings, executor=executor)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def unconfigured_client(executor: BackendExecutor) -> TestClient:
    """App whose NOTION_KEY is missing."""
    settings = Settings(notion_key=None, debug=True, _env_file=None)
    return TestClient(create_app(settings=settings, executor=executor))
