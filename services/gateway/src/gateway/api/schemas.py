"""API request/response schemas."""
from typing import Any, Literal

from pydantic import BaseModel, Field

from knowledge.schemas import SearchResult


class RagSource(BaseModel):
    text: str
    relevance: float
    region: str = ""


class RagResponse(BaseModel):
    answer: str
    sources: list[RagSource] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str


class ActionError(BaseModel):
    code: int
    message: str


class SearchActionResponse(BaseModel):
    success: bool
    result: SearchResult | None = None
    error: ActionError | None = None


class TopicsResponse(BaseModel):
    success: bool
    topics: list[str] | None = None
    error: ActionError | None = None


class ToolInfo(BaseModel):
    name: str
    description: str
    inputSchema: dict[str, Any]


class ToolCatalog(BaseModel):
    tools: list[ToolInfo]


class ToolsResponse(BaseModel):
    success: bool
    result: ToolCatalog


class ToolHealthResponse(BaseModel):
    success: bool
    status: Literal["online", "offline"]
    message: str
