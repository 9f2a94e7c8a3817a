"""Read-only tool handlers.

Handles:
- search_notion: Keyword search across the workspace
- read_page: Read the text content of a page
"""

from typing import Any

from ..notion import NotionClient
from .base import require

NO_RESULTS = "No results found"
NO_CONTENT = "No content"


async def handle_search(params: dict[str, Any], client: NotionClient) -> str:
    """Search the workspace and list matches one per line.

    Args:
        params: Dict containing:
            - query: Keyword to search for

    Returns:
        Lines of the form "- [title] (ID: id)", or NO_RESULTS
    """
    hits = await client.search(require(params, "query"))
    text = "\n".join(f"- [{hit.title}] (ID: {hit.id})" for hit in hits)
    return text or NO_RESULTS


async def handle_read(params: dict[str, Any], client: NotionClient) -> str:
    """Read a page's blocks as newline-separated text."""
    fragments = await client.read_content(require(params, "page_id"))
    text = "\n".join(fragments)
    return text or NO_CONTENT
