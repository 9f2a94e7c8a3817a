"""Pydantic models for the Notion Gateway.

This module re-exports all models. Import from submodules directly for
cleaner imports:

    from notion_gateway.models.enums import ToolName
    from notion_gateway.models.responses import ToolResult
"""

from .enums import ToolName
from .requests import (
    AppendRequest,
    ArchiveRequest,
    CommentRequest,
    ReadRequest,
    SearchRequest,
    StatusRequest,
    WriteRequest,
)
from .responses import (
    HealthResponse,
    RestError,
    RestResult,
    SearchHit,
    ToolResult,
)

__all__ = [
    # Enums
    "ToolName",
    # Request models
    "AppendRequest",
    "ArchiveRequest",
    "CommentRequest",
    "ReadRequest",
    "SearchRequest",
    "StatusRequest",
    "WriteRequest",
    # Response models
    "HealthResponse",
    "RestError",
    "RestResult",
    "SearchHit",
    "ToolResult",
]
