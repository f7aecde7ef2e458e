"""Process-wide knowledge service and client accessors."""
from collections.abc import Mapping
from typing import Any

from knowledge.clients.base import ChatModel, VectorIndex
from knowledge.clients.registry import ClientRegistry
from knowledge.schemas import SearchQuery, SearchResult
from knowledge.service import KnowledgeService

_registry: ClientRegistry | None = None
_service: KnowledgeService | None = None


def get_registry() -> ClientRegistry:
    global _registry
    if _registry is None:
        _registry = ClientRegistry()
    return _registry


def get_vector_client() -> VectorIndex:
    return get_registry().get_vector_client()


def get_language_model_client() -> ChatModel:
    return get_registry().get_language_model_client()


def get_service() -> KnowledgeService:
    global _service
    if _service is None:
        _service = KnowledgeService(get_registry())
    return _service


def reset() -> None:
    """Drop the process-wide registry and service (used by tests)."""
    global _registry, _service
    _registry = None
    _service = None


async def search_food_knowledge(params: Mapping[str, Any] | SearchQuery) -> SearchResult:
    return await get_service().search(params)


async def list_food_topics() -> list[str]:
    return await get_service().list_topics()
