"""Base infrastructure for tool handlers.

Each handler receives the tool arguments and a credential-scoped
NotionClient, performs exactly one backend operation and returns the
text shown to the caller. Backend failures propagate as BackendError.
"""

from typing import TYPE_CHECKING, Any, Callable, Coroutine

from ...errors import ToolArgumentError

if TYPE_CHECKING:
    from ..notion import NotionClient


# Type alias for handler functions
HandlerFunc = Callable[
    [dict[str, Any], "NotionClient"],
    Coroutine[Any, Any, str],
]


def require(params: dict[str, Any], name: str) -> str:
    """Return a required argument, raising ToolArgumentError if absent."""
    value = params.get(name)
    if value is None:
        raise ToolArgumentError(name)
    return str(value)
