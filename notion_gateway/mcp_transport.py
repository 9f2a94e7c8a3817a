"""MCP SSE transport router.

Endpoints:
    GET  /sse       -> SSE stream (endpoint event, then keep-alive pings)
    POST /messages  -> JSON-RPC 2.0 messages (initialize, tools/list, tools/call, ...)

The two routes share nothing but the URL handed out in the endpoint event.
Each POST is dispatched on its own; no session state is looked up.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, StreamingResponse

from .api.deps import get_credential, get_dispatcher, get_request_origin, get_settings
from .config import Settings
from .mcp.dispatcher import McpDispatcher
from .mcp.sse import SSE_HEADERS, SseSession

logger = logging.getLogger(__name__)

MESSAGE_PATH = "/messages"

router = APIRouter(tags=["MCP"])


@router.get("/sse")
async def mcp_sse_endpoint(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> StreamingResponse:
    """
    Open an MCP SSE session.

    The first event is ``endpoint`` carrying the absolute URL to POST
    JSON-RPC messages to; a ``ping`` event follows every keep-alive interval
    until the client disconnects.
    """
    endpoint_url = get_request_origin(request) + MESSAGE_PATH
    session = SseSession(
        endpoint_url,
        is_disconnected=request.is_disconnected,
        keepalive_interval=settings.keepalive_interval,
    )
    return StreamingResponse(
        session.events(),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )


@router.post(MESSAGE_PATH)
async def mcp_messages_endpoint(
    request: Request,
    credential: Annotated[str, Depends(get_credential)],
    dispatcher: Annotated[McpDispatcher, Depends(get_dispatcher)],
) -> JSONResponse:
    """
    Handle one JSON-RPC 2.0 message.

    Protocol-level errors are still answered with HTTP 200 and an ``error``
    member. HTTP 500 is reserved for configuration faults, raised by the
    credential dependency before the body is read.
    """
    raw = await request.body()
    response = await dispatcher.handle_payload(raw, credential)
    return JSONResponse(response)
