"""Backend executor binding.

Turns (tool name, arguments, credential) into a ToolResult. Every call
builds a fresh NotionClient from the credential and closes it afterwards;
clients are never shared between calls.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

import httpx

from ..config import Settings
from ..errors import BackendError
from ..models import ToolName, ToolResult
from .handlers import (
    HandlerFunc,
    handle_append,
    handle_archive,
    handle_comment,
    handle_read,
    handle_search,
    handle_update_status,
    handle_write,
)
from .notion import NotionClient

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], NotionClient]

HANDLERS: dict[ToolName, HandlerFunc] = {
    ToolName.SEARCH_NOTION: handle_search,
    ToolName.READ_PAGE: handle_read,
    ToolName.WRITE_PAGE: handle_write,
    ToolName.APPEND_CONTENT: handle_append,
    ToolName.ADD_COMMENT: handle_comment,
    ToolName.UPDATE_STATUS: handle_update_status,
    ToolName.ARCHIVE_PAGE: handle_archive,
}


def notion_client_factory(settings: Settings) -> ClientFactory:
    """Build a factory producing NotionClients configured from settings."""

    def factory(credential: str) -> NotionClient:
        return NotionClient(
            credential,
            base_url=settings.notion_api_url,
            notion_version=settings.notion_version,
            timeout=settings.backend_timeout,
        )

    return factory


class BackendExecutor:
    """Executes tool handlers against a freshly-built Notion client."""

    def __init__(
        self,
        client_factory: ClientFactory,
        timeout: float | None = 30.0,
        handlers: dict[ToolName, HandlerFunc] | None = None,
    ) -> None:
        self._client_factory = client_factory
        self._timeout = timeout
        self._handlers = handlers if handlers is not None else HANDLERS

    @classmethod
    def from_settings(cls, settings: Settings) -> "BackendExecutor":
        return cls(notion_client_factory(settings), timeout=settings.backend_timeout)

    async def execute(
        self, tool_name: str, arguments: dict[str, Any], credential: str
    ) -> ToolResult:
        """Run one tool. Failures are returned, never raised."""
        try:
            handler = self._handlers[ToolName(tool_name)]
        except (ValueError, KeyError):
            return ToolResult.failure(f"Unknown tool: {tool_name}")

        try:
            async with self._client_factory(credential) as client:
                text = await asyncio.wait_for(handler(arguments, client), timeout=self._timeout)
        except BackendError as e:
            logger.warning(f"Tool {tool_name} failed: {e.message}")
            return ToolResult.failure(e.message)
        except TimeoutError:
            logger.warning(f"Tool {tool_name} timed out after {self._timeout}s")
            return ToolResult.failure(f"Backend call timed out after {self._timeout}s")
        except httpx.HTTPError as e:
            logger.warning(f"Tool {tool_name} transport error: {e}")
            return ToolResult.failure(str(e) or type(e).__name__)

        return ToolResult.success(text)
