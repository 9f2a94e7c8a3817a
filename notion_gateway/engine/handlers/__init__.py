"""Tool handlers for the Notion backend.

This package contains tool handlers organized by domain:
- search: Read-only access (search_notion, read_page)
- pages: Page mutations (write_page, append_content, update_status, archive_page)
- comments: Discussion (add_comment)

Each handler is a standalone async function that takes:
- params: dict[str, Any] - Tool arguments from the MCP call or REST body
- client: NotionClient - Credential-scoped backend client

And returns the text result shown to the caller.
"""

from .base import HandlerFunc, require
from .comments import handle_comment
from .pages import (
    handle_append,
    handle_archive,
    handle_update_status,
    handle_write,
)
from .search import handle_read, handle_search

__all__ = [
    # Base
    "HandlerFunc",
    "require",
    # Read handlers
    "handle_search",
    "handle_read",
    # Page handlers
    "handle_write",
    "handle_append",
    "handle_update_status",
    "handle_archive",
    # Comment handlers
    "handle_comment",
]
