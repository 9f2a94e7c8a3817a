"""Request models for the REST surface."""

from pydantic import BaseModel, Field

# ============ REST REQUEST MODELS ============


class SearchRequest(BaseModel):
    """Body for POST /search."""

    query: str = Field(..., description="Keyword to search for")


class ReadRequest(BaseModel):
    """Body for POST /read."""

    page_id: str = Field(..., description="Page ID")


class WriteRequest(BaseModel):
    """Body for POST /write."""

    database_id: str = Field(..., description="Database ID")
    title: str = Field(..., description="Page title")
    content: str = Field(..., description="Body text")


class AppendRequest(BaseModel):
    """Body for POST /append."""

    page_id: str = Field(..., description="Page ID")
    content: str = Field(..., description="Text to append")


class CommentRequest(BaseModel):
    """Body for POST /comment."""

    page_id: str = Field(..., description="Page ID")
    text: str = Field(..., description="Comment text")


class StatusRequest(BaseModel):
    """Body for POST /status."""

    page_id: str = Field(..., description="Page ID")
    property_name: str = Field(..., description="Name of the status property")
    status_name: str = Field(..., description="Status value to set")


class ArchiveRequest(BaseModel):
    """Body for POST /archive."""

    page_id: str = Field(..., description="Page ID")
