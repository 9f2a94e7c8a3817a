"""OpenAPI 3.1 document for the REST surface.

The document is rebuilt for every request so that ``servers[0].url``
always matches the host the client used (no hardcoded deployment URL).
Request body schemas are taken from the tool registry, so the REST and MCP
surfaces always advertise the same arguments.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request

from .. import __version__
from ..mcp.tool_defs import ToolRegistry
from .deps import get_registry, get_request_origin
from .rest import REST_OPERATIONS

router = APIRouter(tags=["OpenAPI"])

API_TITLE = "Notion Tool"
API_DESCRIPTION = "Search, read, write and update pages in a Notion workspace."
SERVER_DESCRIPTION = "Notion Gateway"


def build_openapi_document(origin: str, registry: ToolRegistry) -> dict[str, Any]:
    """Build the OpenAPI document for the REST routes.

    Args:
        origin: Scheme and host the document is served from
        registry: Tool registry supplying the request schemas

    Returns:
        OpenAPI 3.1 document as a dict
    """
    paths: dict[str, Any] = {}
    for op in REST_OPERATIONS:
        descriptor = registry.lookup(op.tool.value)
        if descriptor is None:
            continue
        operation: dict[str, Any] = {
            "operationId": op.operation_id,
            "summary": op.summary,
        }
        if op.description:
            operation["description"] = op.description
        operation["requestBody"] = {
            "required": True,
            "content": {"application/json": {"schema": descriptor.definition()["inputSchema"]}},
        }
        operation["responses"] = {
            "200": {
                "description": "Success",
                "content": {
                    "application/json": {
                        "schema": {
                            "type": "object",
                            "properties": {"result": {"type": "string"}},
                            "required": ["result"],
                        }
                    }
                },
            },
            "500": {
                "description": "Backend failure",
                "content": {
                    "application/json": {
                        "schema": {
                            "type": "object",
                            "properties": {"error": {"type": "string"}},
                            "required": ["error"],
                        }
                    }
                },
            },
        }
        paths[op.path] = {"post": operation}

    return {
        "openapi": "3.1.0",
        "info": {
            "title": API_TITLE,
            "description": API_DESCRIPTION,
            "version": __version__,
        },
        "servers": [{"url": origin, "description": SERVER_DESCRIPTION}],
        "paths": paths,
    }


@router.get("/openapi.json")
async def openapi_document(
    request: Request,
    registry: Annotated[ToolRegistry, Depends(get_registry)],
) -> dict[str, Any]:
    """OpenAPI document describing the REST routes, for agent builders."""
    return build_openapi_document(get_request_origin(request), registry)
