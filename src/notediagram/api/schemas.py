"""Request/response schemas for the HTTP API."""

from typing import Any

from pydantic import BaseModel, Field

from notediagram.constants import MAX_INPUT_CHARS


class APIResponse(BaseModel):
    """Standard response envelope for all API endpoints."""

    success: bool
    data: Any | None = None
    error: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class TextRequest(BaseModel):
    """Request body carrying the raw note text."""

    text: str = Field(default="", max_length=MAX_INPUT_CHARS)


class DiagramTypeInfo(BaseModel):
    """Presentation metadata for one diagram type."""

    type: str
    display_name: str
    icon: str
    width: int | None = None
    height: int | None = None
