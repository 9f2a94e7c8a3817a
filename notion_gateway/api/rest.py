"""REST surface: one POST route per tool.

Every route answers ``200 {"result": str}`` on success and
``500 {"error": str}`` on failure, passing the backend message through.
The routes share the backend executor with the MCP transport.
"""

import logging
from dataclasses import dataclass
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..engine import BackendExecutor
from ..models import (
    AppendRequest,
    ArchiveRequest,
    CommentRequest,
    ReadRequest,
    RestError,
    RestResult,
    SearchRequest,
    StatusRequest,
    ToolName,
    WriteRequest,
)
from .deps import get_credential, get_executor

logger = logging.getLogger(__name__)

router = APIRouter(tags=["REST"])


@dataclass(frozen=True)
class RestOperation:
    """Route metadata shared by the router and the OpenAPI document."""

    path: str
    tool: ToolName
    operation_id: str
    summary: str
    description: str | None = None


REST_OPERATIONS: tuple[RestOperation, ...] = (
    RestOperation("/search", ToolName.SEARCH_NOTION, "searchNotion", "Search Notion", "Search Notion pages by keyword."),
    RestOperation("/read", ToolName.READ_PAGE, "readPage", "Read page", "Read a page's content by ID."),
    RestOperation("/write", ToolName.WRITE_PAGE, "writePage", "Create page", "Create a new page in a database."),
    RestOperation("/append", ToolName.APPEND_CONTENT, "appendContent", "Append content", "Append content to the bottom of an existing page."),
    RestOperation("/comment", ToolName.ADD_COMMENT, "addComment", "Add comment"),
    RestOperation("/status", ToolName.UPDATE_STATUS, "updateStatus", "Update status"),
    RestOperation("/archive", ToolName.ARCHIVE_PAGE, "archivePage", "Archive page"),
)

_RESPONSES = {500: {"model": RestError, "description": "Backend failure"}}


async def _run_tool(
    tool: ToolName,
    body: BaseModel,
    credential: str,
    executor: BackendExecutor,
) -> JSONResponse:
    result = await executor.execute(tool.value, body.model_dump(), credential)
    if not result.ok:
        return JSONResponse(RestError(error=result.error).model_dump(), status_code=500)
    return JSONResponse(RestResult(result=result.text).model_dump())


@router.post("/search", response_model=RestResult, responses=_RESPONSES)
async def search_notion(
    body: SearchRequest,
    credential: Annotated[str, Depends(get_credential)],
    executor: Annotated[BackendExecutor, Depends(get_executor)],
):
    """Search Notion pages by keyword."""
    return await _run_tool(ToolName.SEARCH_NOTION, body, credential, executor)


@router.post("/read", response_model=RestResult, responses=_RESPONSES)
async def read_page(
    body: ReadRequest,
    credential: Annotated[str, Depends(get_credential)],
    executor: Annotated[BackendExecutor, Depends(get_executor)],
):
    """Read a page's content by ID."""
    return await _run_tool(ToolName.READ_PAGE, body, credential, executor)


@router.post("/write", response_model=RestResult, responses=_RESPONSES)
async def write_page(
    body: WriteRequest,
    credential: Annotated[str, Depends(get_credential)],
    executor: Annotated[BackendExecutor, Depends(get_executor)],
):
    """Create a new page in a database."""
    return await _run_tool(ToolName.WRITE_PAGE, body, credential, executor)


@router.post("/append", response_model=RestResult, responses=_RESPONSES)
async def append_content(
    body: AppendRequest,
    credential: Annotated[str, Depends(get_credential)],
    executor: Annotated[BackendExecutor, Depends(get_executor)],
):
    return await _run_tool(ToolName.APPEND_CONTENT, body, credential, executor)


@router.post("/comment", response_model=RestResult, responses=_RESPONSES)
async def add_comment(
    body: CommentRequest,
    credential: Annotated[str, Depends(get_credential)],
    executor: Annotated[BackendExecutor, Depends(get_executor)],
):
    return await _run_tool(ToolName.ADD_COMMENT, body, credential, executor)


@router.post("/status", response_model=RestResult, responses=_RESPONSES)
async def update_status(
    body: StatusRequest,
    credential: Annotated[str, Depends(get_credential)],
    executor: Annotated[BackendExecutor, Depends(get_executor)],
):
    return await _run_tool(ToolName.UPDATE_STATUS, body, credential, executor)


@router.post("/archive", response_model=RestResult, responses=_RESPONSES)
async def archive_page(
    body: ArchiveRequest,
    credential: Annotated[str, Depends(get_credential)],
    executor: Annotated[BackendExecutor, Depends(get_executor)],
):
    return await _run_tool(ToolName.ARCHIVE_PAGE, body, credential, executor)
