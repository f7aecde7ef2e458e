"""Shared fixtures for knowledge engine tests."""
from unittest.mock import AsyncMock, MagicMock

import pytest

from knowledge.clients.base import ChatChoice, ChatCompletion, ChatModel, VectorHit, VectorIndex
from knowledge.clients.registry import ClientRegistry
from knowledge.service import KnowledgeService

UMAMI_HIT = VectorHit(
    id="1",
    score=0.91,
    metadata={"text": "Umami is a basic taste...", "region": "Japan"},
)


def completion(text: str | None) -> ChatCompletion:
    return ChatCompletion(choices=[ChatChoice(content=text)])


@pytest.fixture
def vector_client() -> MagicMock:
    client = MagicMock(spec=VectorIndex)
    client.query = AsyncMock(return_value=[UMAMI_HIT])
    return client


@pytest.fixture
def llm_client() -> MagicMock:
    client = MagicMock(spec=ChatModel)
    client.complete = AsyncMock(
        return_value=completion("Umami is considered the fifth basic taste.")
    )
    return client


@pytest.fixture
def service(vector_client: MagicMock, llm_client: MagicMock) -> KnowledgeService:
    registry = ClientRegistry(vector_client=vector_client, llm_client=llm_client)
    return KnowledgeService(registry)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ("UPSTASH_VECTOR_REST_URL", "UPSTASH_VECTOR_REST_TOKEN", "GROQ_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
