"""Page mutation tool handlers.

Handles:
- write_page: Create a page in a database
- append_content: Append a paragraph to a page
- update_status: Change a status property
- archive_page: Archive (delete) a page
"""

from typing import Any

from ..notion import NotionClient
from .base import require


async def handle_write(params: dict[str, Any], client: NotionClient) -> str:
    await client.create_entry(
        require(params, "database_id"),
        require(params, "title"),
        require(params, "content"),
    )
    return "Page created"


async def handle_append(params: dict[str, Any], client: NotionClient) -> str:
    await client.append_content(require(params, "page_id"), require(params, "content"))
    return "Content appended"


async def handle_update_status(params: dict[str, Any], client: NotionClient) -> str:
    """Set params["property_name"] to the status option params["status_name"]."""
    await client.update_property(
        require(params, "page_id"),
        require(params, "property_name"),
        require(params, "status_name"),
    )
    return "Status updated"


async def handle_archive(params: dict[str, Any], client: NotionClient) -> str:
    await client.archive(require(params, "page_id"))
    return "Page archived"
