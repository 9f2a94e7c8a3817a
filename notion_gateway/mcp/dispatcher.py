"""JSON-RPC method dispatcher for the MCP message route.

The dispatcher is stateless: each payload is parsed, routed by method
name and answered independently. Tools come from the injected
ToolRegistry; nothing is read from module-level state.

Every outcome is a JSON-RPC dict. Structural faults (unparsable body,
invalid envelope, unknown method) and application faults (unknown tool,
backend failure) are both expressed as error objects so that the HTTP
layer can always answer 200.
"""

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from .. import __version__
from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    SERVER_ERROR,
    jsonrpc_ack,
    jsonrpc_error,
    jsonrpc_response,
)
from .tool_defs import ToolRegistry

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "notion-gateway"

MethodHandler = Callable[[Any, dict[str, Any], str], Awaitable[dict]]


class McpDispatcher:
    """Routes JSON-RPC requests to MCP method handlers."""

    def __init__(
        self,
        registry: ToolRegistry,
        server_name: str = SERVER_NAME,
        server_version: str = __version__,
    ) -> None:
        self.registry = registry
        self.server_info = {"name": server_name, "version": server_version}
        self._methods: dict[str, MethodHandler] = {
            "initialize": self._initialize,
            "notifications/initialized": self._initialized,
            "ping": self._ping,
            "tools/list": self._tools_list,
            "tools/call": self._tools_call,
        }

    async def handle_payload(self, raw: bytes | str, credential: str) -> dict:
        """Parse a raw request body and dispatch it."""
        try:
            body = json.loads(raw)
        except (ValueError, UnicodeDecodeError):
            return jsonrpc_error(None, PARSE_ERROR)
        return await self.dispatch(body, credential)

    async def dispatch(self, body: Any, credential: str) -> dict:
        """Dispatch one decoded JSON-RPC request."""
        if not isinstance(body, dict):
            return jsonrpc_error(None, INVALID_REQUEST)

        id = body.get("id")
        method = body.get("method")
        if not isinstance(method, str):
            return jsonrpc_error(id, INVALID_REQUEST)

        params = body.get("params")
        if not isinstance(params, dict):
            params = {}

        handler = self._methods.get(method)
        if handler is None:
            logger.debug(f"Unknown JSON-RPC method: {method}")
            return jsonrpc_error(id, METHOD_NOT_FOUND)

        try:
            return await handler(id, params, credential)
        except Exception as e:
            logger.error(f"Unhandled error in {method}: {e}", exc_info=True)
            return jsonrpc_error(id, INTERNAL_ERROR)

    # ============ METHODS ============

    async def _initialize(self, id: Any, params: dict[str, Any], credential: str) -> dict:
        client_info = params.get("clientInfo") or {}
        logger.info(
            f"MCP initialize from {client_info.get('name', 'unknown client')} "
            f"(protocol {params.get('protocolVersion', 'unspecified')})"
        )
        return jsonrpc_response(
            id,
            {
                "protocolVersion": PROTOCOL_VERSION,
                "capabilities": {"tools": {"listChanged": False}},
                "serverInfo": dict(self.server_info),
            },
        )

    async def _initialized(self, id: Any, params: dict[str, Any], credential: str) -> dict:
        return jsonrpc_ack()

    async def _ping(self, id: Any, params: dict[str, Any], credential: str) -> dict:
        return jsonrpc_response(id, {})

    async def _tools_list(self, id: Any, params: dict[str, Any], credential: str) -> dict:
        return jsonrpc_response(id, {"tools": self.registry.list()})

    async def _tools_call(self, id: Any, params: dict[str, Any], credential: str) -> dict:
        tool_name = params.get("name")
        if tool_name is None:
            return jsonrpc_error(id, INVALID_PARAMS, "Missing tool name")

        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}
        elif not isinstance(arguments, dict):
            return jsonrpc_error(id, INVALID_PARAMS, "Tool arguments must be an object")

        # Names that are not strings can never be registered
        descriptor = self.registry.lookup(tool_name) if isinstance(tool_name, str) else None
        if descriptor is None:
            return jsonrpc_error(id, SERVER_ERROR, f"Unknown tool: {tool_name}")

        result = await descriptor.executor(arguments, credential)
        if not result.ok:
            logger.info(f"tools/call {tool_name} failed: {result.error}")
            return jsonrpc_error(id, SERVER_ERROR, result.error)

        logger.info(f"tools/call {tool_name} succeeded")
        return jsonrpc_response(id, {"content": [{"type": "text", "text": result.text}]})
