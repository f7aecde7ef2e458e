"""Food knowledge retrieval and answer synthesis."""
from knowledge.engine import (
    get_language_model_client,
    get_service,
    get_vector_client,
    list_food_topics,
    search_food_knowledge,
)
from knowledge.errors import ConfigurationError, KnowledgeError, UpstreamError, ValidationError
from knowledge.schemas import SearchQuery, SearchResult, Source

__all__ = [
    "ConfigurationError",
    "KnowledgeError",
    "SearchQuery",
    "SearchResult",
    "Source",
    "UpstreamError",
    "ValidationError",
    "get_language_model_client",
    "get_service",
    "get_vector_client",
    "list_food_topics",
    "search_food_knowledge",
]
