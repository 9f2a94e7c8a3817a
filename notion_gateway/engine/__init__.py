"""Backend engine: the Notion client, tool handlers and executor binding."""

from .executor import HANDLERS, BackendExecutor, ClientFactory, notion_client_factory
from .notion import NotionClient

__all__ = [
    "HANDLERS",
    "BackendExecutor",
    "ClientFactory",
    "NotionClient",
    "notion_client_factory",
]
