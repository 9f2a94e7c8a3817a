"""MCP (Model Context Protocol) engine.

This module contains the protocol components behind the SSE transport:
- Tool definitions and the read-only tool registry
- JSON-RPC 2.0 helpers
- The method dispatcher
- The per-connection SSE session

The transport router lives in mcp_transport.py.
"""

from .dispatcher import PROTOCOL_VERSION, McpDispatcher
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
from .sse import SseSession, format_sse
from .tool_defs import TOOL_DEFINITIONS, ToolDescriptor, ToolRegistry, build_registry

__all__ = [
    # Tool registry
    "TOOL_DEFINITIONS",
    "ToolDescriptor",
    "ToolRegistry",
    "build_registry",
    # Dispatcher
    "McpDispatcher",
    "PROTOCOL_VERSION",
    # SSE
    "SseSession",
    "format_sse",
    # JSON-RPC helpers
    "jsonrpc_response",
    "jsonrpc_error",
    "jsonrpc_ack",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "SERVER_ERROR",
]
