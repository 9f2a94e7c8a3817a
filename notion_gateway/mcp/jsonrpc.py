"""JSON-RPC 2.0 envelopes used on the MCP message route.

Every reply the gateway sends on ``POST /messages`` is built here, so the
``jsonrpc``/``id`` framing is identical for results, errors and
notification acknowledgments. See https://www.jsonrpc.org/specification
"""

from typing import Any

JSONRPC_VERSION = "2.0"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
# Unknown tool or failed backend call
SERVER_ERROR = -32000

STANDARD_MESSAGES: dict[int, str] = {
    PARSE_ERROR: "Parse error",
    INVALID_REQUEST: "Invalid Request",
    METHOD_NOT_FOUND: "Method not found",
    INVALID_PARAMS: "Invalid params",
    INTERNAL_ERROR: "Internal error",
    SERVER_ERROR: "Server error",
}


def _envelope(id: Any) -> dict[str, Any]:
    return {"jsonrpc": JSONRPC_VERSION, "id": id}


def jsonrpc_response(id: Any, result: Any) -> dict[str, Any]:
    """Success reply echoing the request id."""
    return {**_envelope(id), "result": result}


def jsonrpc_error(id: Any, code: int, message: str | None = None) -> dict[str, Any]:
    """Error reply.

    Args:
        id: Request id, or None when the request could not be read far
            enough to recover one
        code: One of the error code constants above
        message: Human-readable message; defaults to the standard text
            for ``code``

    Returns:
        Envelope with an ``error`` member and no ``result``
    """
    if message is None:
        message = STANDARD_MESSAGES.get(code, "Server error")
    return {**_envelope(id), "error": {"code": code, "message": message}}


def jsonrpc_ack() -> dict[str, Any]:
    """Bare envelope returned for client notifications such as
    ``notifications/initialized``; carries neither result nor error."""
    return _envelope(None)
