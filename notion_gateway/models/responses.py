"""Response and result models for the Notion Gateway."""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator


class ToolResult(BaseModel):
    """Outcome of one tool execution: either text or an error message."""

    text: str | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "ToolResult":
        if (self.text is None) == (self.error is None):
            raise ValueError("ToolResult needs exactly one of text or error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(text=text)

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(error=message)


class SearchHit(BaseModel):
    """A single search match returned by the backend."""

    id: str
    title: str


class RestResult(BaseModel):
    """Successful REST response."""

    result: str


class RestError(BaseModel):
    """Failed REST response."""

    error: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Gateway version")
    timestamp: datetime = Field(..., description="Current server time")
