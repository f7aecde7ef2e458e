"""Lazy construction of the vector and chat model clients.

Each client kind is built at most once per registry, on first use, from
settings. Construction is guarded by one lock per kind; handles are stateless
between calls, so two handles to the same service behave identically.
"""
import threading

import structlog

from knowledge.clients.base import ChatModel, VectorIndex
from knowledge.clients.llm_client import GroqChatClient
from knowledge.clients.vector_client import UpstashVectorClient
from knowledge.config import KnowledgeSettings
from knowledge.errors import ConfigurationError

log = structlog.get_logger(__name__)


class ClientRegistry:
    def __init__(
        self,
        settings: KnowledgeSettings | None = None,
        vector_client: VectorIndex | None = None,
        llm_client: ChatModel | None = None,
    ) -> None:
        self._settings = settings
        self._vector_client = vector_client
        self._llm_client = llm_client
        self._vector_lock = threading.Lock()
        self._llm_lock = threading.Lock()

    def _load_settings(self) -> KnowledgeSettings:
        # Not cached: each construction attempt sees the current environment.
        if self._settings is not None:
            return self._settings
        return KnowledgeSettings()

    def get_vector_client(self) -> VectorIndex:
        if self._vector_client is not None:
            return self._vector_client
        with self._vector_lock:
            if self._vector_client is None:
                settings = self._load_settings()
                missing = settings.first_missing("upstash_vector_rest_url", "upstash_vector_rest_token")
                if missing:
                    raise ConfigurationError(missing)
                self._vector_client = UpstashVectorClient(
                    url=settings.upstash_vector_rest_url,
                    token=settings.upstash_vector_rest_token,
                    timeout=settings.vector_timeout_seconds,
                )
                log.info("vector_client_created", url=settings.upstash_vector_rest_url)
        return self._vector_client

    def get_language_model_client(self) -> ChatModel:
        if self._llm_client is not None:
            return self._llm_client
        with self._llm_lock:
            if self._llm_client is None:
                settings = self._load_settings()
                missing = settings.first_missing("groq_api_key")
                if missing:
                    raise ConfigurationError(missing)
                self._llm_client = GroqChatClient(
                    api_key=settings.groq_api_key,
                    base_url=settings.groq_base_url,
                    timeout=settings.llm_timeout_seconds,
                )
                log.info("llm_client_created", base_url=settings.groq_base_url)
        return self._llm_client
