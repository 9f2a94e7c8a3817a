"""FastAPI dependency injection functions.

This module contains shared dependencies for API endpoints:
- Settings, registry and dispatcher lookup from application state
- Backend credential extraction
- Request origin detection (proxy-aware)
"""

import logging
from typing import Annotated

from fastapi import Depends, Request

from ..config import Settings
from ..engine import BackendExecutor
from ..errors import ConfigurationError
from ..mcp.dispatcher import McpDispatcher
from ..mcp.tool_defs import ToolRegistry

logger = logging.getLogger(__name__)


# ============ APPLICATION STATE ============


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_registry(request: Request) -> ToolRegistry:
    return request.app.state.registry


def get_dispatcher(request: Request) -> McpDispatcher:
    return request.app.state.dispatcher


def get_executor(request: Request) -> BackendExecutor:
    return request.app.state.executor


# ============ CREDENTIAL ============


async def get_credential(settings: Annotated[Settings, Depends(get_settings)]) -> str:
    """Return the Notion credential.

    Raises:
        ConfigurationError if NOTION_KEY is not configured. This runs before
        the request body is read, so no backend call can happen.
    """
    if not settings.notion_key:
        logger.error("Request rejected: NOTION_KEY is not configured")
        raise ConfigurationError("NOTION_KEY is not configured")
    return settings.notion_key


# ============ HEADER EXTRACTORS ============


def get_request_origin(request: Request) -> str:
    """Origin (scheme://host) the client used to reach us.

    Prefers X-Forwarded-Proto / X-Forwarded-Host (behind a reverse proxy),
    then the Host header, then the ASGI server address.
    """
    forwarded_proto = request.headers.get("X-Forwarded-Proto")
    forwarded_host = request.headers.get("X-Forwarded-Host")
    scheme = forwarded_proto.split(",")[0].strip() if forwarded_proto else request.url.scheme
    if forwarded_host:
        host = forwarded_host.split(",")[0].strip()
    else:
        host = request.headers.get("host") or request.url.netloc
    return f"{scheme}://{host}"
