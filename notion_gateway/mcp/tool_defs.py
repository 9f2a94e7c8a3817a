"""MCP tool definitions and the read-only tool registry.

TOOL_DEFINITIONS holds the name, description and input schema of every
tool returned by tools/list. build_registry() binds each definition to a
backend executor, producing the ToolRegistry consulted by the dispatcher.

Tools:
    - Read: search_notion, read_page
    - Write: write_page, append_content, add_comment
    - Manage: update_status, archive_page
"""

import copy
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Any

from ..models import ToolName, ToolResult

if TYPE_CHECKING:
    from ..engine import BackendExecutor

ToolExecutor = Callable[[dict[str, Any], str], Awaitable[ToolResult]]


TOOL_DEFINITIONS: list[dict] = [
    # ============ Read Tools ============
    {
        "name": ToolName.SEARCH_NOTION.value,
        "description": "Search Notion pages by keyword. Returns up to 5 matches with their IDs, most recently edited first.",
        "inputSchema": {
            "type": "object",
            "properties": {"query": {"type": "string", "description": "Keyword to search for"}},
            "required": ["query"],
        },
    },
    {
        "name": ToolName.READ_PAGE.value,
        "description": "Read the text content of a Notion page by its ID.",
        "inputSchema": {
            "type": "object",
            "properties": {"page_id": {"type": "string", "description": "Page ID"}},
            "required": ["page_id"],
        },
    },
    # ============ Write Tools ============
    {
        "name": ToolName.WRITE_PAGE.value,
        "description": "Create a new page in a Notion database.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "database_id": {"type": "string", "description": "Database ID"},
                "title": {"type": "string", "description": "Page title"},
                "content": {"type": "string", "description": "Body text"},
            },
            "required": ["database_id", "title", "content"],
        },
    },
    {
        "name": ToolName.APPEND_CONTENT.value,
        "description": "Append a paragraph to the bottom of an existing page.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "page_id": {"type": "string", "description": "Page ID"},
                "content": {"type": "string", "description": "Text to append"},
            },
            "required": ["page_id", "content"],
        },
    },
    {
        "name": ToolName.ADD_COMMENT.value,
        "description": "Add a comment to a page.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "page_id": {"type": "string", "description": "Page ID"},
                "text": {"type": "string", "description": "Comment text"},
            },
            "required": ["page_id", "text"],
        },
    },
    # ============ Manage Tools ============
    {
        "name": ToolName.UPDATE_STATUS.value,
        "description": "Change the value of a status property on a page.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "page_id": {"type": "string", "description": "Page ID"},
                "property_name": {"type": "string", "description": "Name of the status property"},
                "status_name": {"type": "string", "description": "Status value to set"},
            },
            "required": ["page_id", "property_name", "status_name"],
        },
    },
    {
        "name": ToolName.ARCHIVE_PAGE.value,
        "description": "Archive (delete) a page.",
        "inputSchema": {
            "type": "object",
            "properties": {"page_id": {"type": "string", "description": "Page ID"}},
            "required": ["page_id"],
        },
    },
]


@dataclass(frozen=True)
class ToolDescriptor:
    """A registered tool and the capability that executes it."""

    name: str
    description: str
    input_schema: dict[str, Any]
    executor: ToolExecutor

    def definition(self) -> dict[str, Any]:
        """Serializable view for tools/list (never includes the executor)."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }


class ToolRegistry:
    """Immutable table of tool descriptors, keyed by unique name."""

    def __init__(self, descriptors: Iterable[ToolDescriptor]) -> None:
        tools: dict[str, ToolDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in tools:
                raise ValueError(f"Duplicate tool name: {descriptor.name}")
            tools[descriptor.name] = descriptor
        self._tools = tools

    def list(self) -> list[dict[str, Any]]:
        return [descriptor.definition() for descriptor in self._tools.values()]

    def lookup(self, name: str) -> ToolDescriptor | None:
        return self._tools.get(name)

    def names(self) -> tuple[str, ...]:
        return tuple(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


def build_registry(
    executor: "BackendExecutor",
    definitions: list[dict] | None = None,
) -> ToolRegistry:
    """Bind each tool definition to the executor.

    Args:
        executor: Backend executor used for every tool
        definitions: Tool definitions (defaults to TOOL_DEFINITIONS)

    Returns:
        ToolRegistry with one descriptor per definition
    """
    return ToolRegistry(
        ToolDescriptor(
            name=definition["name"],
            description=definition["description"],
            input_schema=copy.deepcopy(definition["inputSchema"]),
            executor=partial(executor.execute, definition["name"]),
        )
        for definition in (definitions if definitions is not None else TOOL_DEFINITIONS)
    )
