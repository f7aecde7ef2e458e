"""Retrieval and answer synthesis over the food knowledge base."""
import time
from collections.abc import Mapping
from typing import Any, Protocol

import structlog

from knowledge import metrics
from knowledge.clients.base import ChatModel, VectorIndex
from knowledge.errors import ConfigurationError, UpstreamError, ValidationError
from knowledge.schemas import SearchQuery, SearchResult, Source
from knowledge.service.prompts import build_messages
from knowledge.service.sources import map_sources
from knowledge.service.topics import list_topics
from knowledge.validation import validate_search_query

CHAT_MODEL = "llama-3.1-8b-instant"
TEMPERATURE = 0.7
MAX_COMPLETION_TOKENS = 1024

log = structlog.get_logger(__name__)


def _outcome(exc: Exception) -> str:
    if isinstance(exc, UpstreamError):
        return exc.kind
    if isinstance(exc, ValidationError):
        return "validation_error"
    if isinstance(exc, ConfigurationError):
        return "configuration_error"
    return "error"


class ClientProvider(Protocol):
    def get_vector_client(self) -> VectorIndex: ...

    def get_language_model_client(self) -> ChatModel: ...


class KnowledgeService:
    def __init__(self, clients: ClientProvider) -> None:
        self._clients = clients

    async def search(self, params: Mapping[str, Any] | SearchQuery) -> SearchResult:
        """Validate params, retrieve sources and optionally synthesize an answer.

        Upstream errors propagate unchanged; nothing is retried.
        """
        t0 = time.perf_counter()
        try:
            result = await self._search(params)
        except Exception as e:
            metrics.SEARCH_REQUESTS.labels(outcome=_outcome(e)).inc()
            raise
        finally:
            metrics.SEARCH_LATENCY.observe(time.perf_counter() - t0)
        metrics.SEARCH_REQUESTS.labels(outcome="ok").inc()
        return result

    async def _search(self, params: Mapping[str, Any] | SearchQuery) -> SearchResult:
        q = validate_search_query(params)

        hits = await self._clients.get_vector_client().query(
            q.query, top_k=q.top_k, include_metadata=True
        )
        sources = map_sources(hits)

        answer: str | None = None
        if q.include_answer and sources:
            answer = await self._synthesize(q.query, sources)

        log.info(
            "knowledge_search",
            top_k=q.top_k,
            hits=len(hits),
            sources=len(sources),
            answered=answer is not None,
        )
        return SearchResult(answer=answer, sources=sources)

    async def _synthesize(self, query: str, sources: list[Source]) -> str | None:
        completion = await self._clients.get_language_model_client().complete(
            build_messages(query, sources),
            model=CHAT_MODEL,
            temperature=TEMPERATURE,
            max_completion_tokens=MAX_COMPLETION_TOKENS,
        )
        content = completion.choices[0].content if completion.choices else None
        answer = content.strip() if content else ""
        if not answer:
            return None
        metrics.ANSWERS_GENERATED.inc()
        return answer

    async def list_topics(self) -> list[str]:
        return list_topics()
