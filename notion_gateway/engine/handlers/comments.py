"""Comment tool handler."""

from typing import Any

from ..notion import NotionClient
from .base import require


async def handle_comment(params: dict[str, Any], client: NotionClient) -> str:
    await client.add_comment(require(params, "page_id"), require(params, "text"))
    return "Comment added"
