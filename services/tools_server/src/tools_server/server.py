"""MCP tool server exposing food knowledge search to AI assistants."""
from typing import Annotated

import structlog
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from mcp.types import ToolAnnotations
from pydantic import Field

from knowledge import get_service
from knowledge.schemas import DEFAULT_TOP_K, QUERY_MAX_LENGTH, TOP_K_MAX, TOP_K_MIN
from knowledge.service import KnowledgeService
from knowledge.tools import LIST_TOPICS_TOOL, SEARCH_FOOD_TOOL

from tools_server.formatting import format_search_result, format_topics

log = structlog.get_logger(__name__)


def create_server(service: KnowledgeService | None = None, name: str = "food-rag") -> FastMCP:
    """Build the FastMCP server; the service defaults to the process-wide one."""
    service = service or get_service()
    mcp = FastMCP(name=name)

    @mcp.tool(
        name=SEARCH_FOOD_TOOL.name,
        description=SEARCH_FOOD_TOOL.description,
        annotations=ToolAnnotations(readOnlyHint=True, destructiveHint=False),
    )
    async def search_food_knowledge(
        query: Annotated[
            str,
            Field(
                description="The food-related question to search for",
                min_length=1,
                max_length=QUERY_MAX_LENGTH,
            ),
        ],
        topK: Annotated[
            int,
            Field(description=f"Number of results ({TOP_K_MIN}-{TOP_K_MAX})", ge=TOP_K_MIN, le=TOP_K_MAX),
        ] = DEFAULT_TOP_K,
        includeAnswer: Annotated[bool, Field(description="Generate AI answer")] = True,
    ) -> str:
        try:
            result = await service.search(
                {"query": query, "topK": topK, "includeAnswer": includeAnswer}
            )
        except Exception as e:
            log.error("tool_search_failed", error=str(e), error_type=type(e).__name__)
            raise ToolError(f"Error searching food knowledge: {e}") from e
        return format_search_result(result)

    @mcp.tool(
        name=LIST_TOPICS_TOOL.name,
        description=LIST_TOPICS_TOOL.description,
        annotations=ToolAnnotations(readOnlyHint=True, destructiveHint=False),
    )
    async def list_food_topics() -> str:
        try:
            topics = await service.list_topics()
        except Exception as e:
            log.error("tool_list_topics_failed", error=str(e))
            raise ToolError(f"Error listing topics: {e}") from e
        return format_topics(topics)

    return mcp
