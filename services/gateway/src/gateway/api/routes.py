"""Gateway API routes."""
from typing import Any

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from knowledge.service import KnowledgeService
from knowledge.tools import TOOLS

from gateway.api.errors import INVALID_PARAMS_CODE, rag_error
from gateway.api.schemas import (
    ActionError,
    ErrorResponse,
    RagResponse,
    RagSource,
    SearchActionResponse,
    ToolCatalog,
    ToolHealthResponse,
    ToolInfo,
    ToolsResponse,
    TopicsResponse,
)

NO_ANSWER = "No relevant information found."
RAG_TOP_K = 3

log = structlog.get_logger(__name__)

router = APIRouter(tags=["food-rag"])


def _service(request: Request) -> KnowledgeService:
    return request.app.state.knowledge_service


async def _json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return None


@router.post(
    "/api/rag",
    response_model=RagResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse},
               429: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def rag(request: Request) -> Any:
    """Answer a chat question; response shape kept for the web UI."""
    body = await _json_body(request)
    question = body.get("question") if isinstance(body, dict) else None
    if not question or not isinstance(question, str):
        return JSONResponse(status_code=400, content={"error": "Question is required"})

    try:
        result = await _service(request).search(
            {"query": question, "topK": RAG_TOP_K, "includeAnswer": True}
        )
    except Exception as exc:
        status, message = rag_error(exc)
        log.error("rag_api_error", status=status, error=str(exc), error_type=type(exc).__name__)
        return JSONResponse(status_code=status, content={"error": message})

    return RagResponse(
        answer=result.answer or NO_ANSWER,
        sources=[
            RagSource(text=s.content, relevance=s.score, region=s.region or "")
            for s in result.sources
        ],
    )


@router.post("/api/v1/search", response_model=SearchActionResponse, response_model_exclude_none=True)
async def search(request: Request) -> SearchActionResponse:
    """Run a search from a raw params object; every failure is an error envelope."""
    try:
        body = await _json_body(request)
        result = await _service(request).search(body)
    except Exception as exc:
        log.error("search_action_error", error=str(exc), error_type=type(exc).__name__)
        return SearchActionResponse(
            success=False,
            error=ActionError(code=INVALID_PARAMS_CODE, message=str(exc) or "Search failed"),
        )
    return SearchActionResponse(success=True, result=result)


@router.get("/api/v1/topics", response_model=TopicsResponse, response_model_exclude_none=True)
async def topics(request: Request) -> TopicsResponse:
    try:
        items = await _service(request).list_topics()
    except Exception as exc:
        log.error("topics_action_error", error=str(exc))
        return TopicsResponse(
            success=False,
            error=ActionError(code=INVALID_PARAMS_CODE, message=str(exc) or "Failed to get topics"),
        )
    return TopicsResponse(success=True, topics=items)


@router.get("/api/v1/tools", response_model=ToolsResponse)
async def tools() -> ToolsResponse:
    return ToolsResponse(
        success=True,
        result=ToolCatalog(tools=[ToolInfo(**t.as_dict()) for t in TOOLS]),
    )


@router.get("/api/v1/tools/health", response_model=ToolHealthResponse)
async def tools_health(request: Request) -> ToolHealthResponse:
    """Liveness by convention: a non-empty topic list means the tools are usable."""
    try:
        items = await _service(request).list_topics()
    except Exception as exc:
        return ToolHealthResponse(success=False, status="offline", message=str(exc) or "Health check failed")
    if items:
        return ToolHealthResponse(
            success=True,
            status="online",
            message=f"Tool server is healthy. {len(items)} topics available.",
        )
    return ToolHealthResponse(
        success=False, status="offline", message="Tool server responded but returned no topics"
    )
