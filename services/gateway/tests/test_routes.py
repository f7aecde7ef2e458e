"""Tests for gateway routes with an injected knowledge service."""
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from gateway.main import create_app
from knowledge.clients.base import ChatChoice, ChatCompletion, ChatModel, VectorHit, VectorIndex
from knowledge.clients.registry import ClientRegistry
from knowledge.errors import ConfigurationError, UpstreamError, ValidationError
from knowledge.schemas import SearchResult
from knowledge.service import KnowledgeService


@pytest.fixture
def vector_client() -> MagicMock:
    client = MagicMock(spec=VectorIndex)
    client.query = AsyncMock(
        return_value=[
            VectorHit(id="1", score=0.91, metadata={"text": "Umami is a basic taste...", "region": "Japan"}),
            VectorHit(id="2", score=0.42, metadata={"original_text": "Glutamate occurs in tomatoes."}),
        ]
    )
    return client


@pytest.fixture
def llm_client() -> MagicMock:
    client = MagicMock(spec=ChatModel)
    client.complete = AsyncMock(
        return_value=ChatCompletion(choices=[ChatChoice(content="Umami is considered the fifth basic taste.")])
    )
    return client


@pytest.fixture
def client(vector_client: MagicMock, llm_client: MagicMock) -> TestClient:
    service = KnowledgeService(ClientRegistry(vector_client=vector_client, llm_client=llm_client))
    with TestClient(create_app(knowledge_service=service)) as c:
        yield c


def _failing_client(exc: Exception) -> TestClient:
    service = MagicMock(spec=KnowledgeService)
    service.search = AsyncMock(side_effect=exc)
    service.list_topics = AsyncMock(return_value=["Food Safety"])
    return TestClient(create_app(knowledge_service=service))


def test_rag_returns_answer_and_renamed_sources(client: TestClient, vector_client: MagicMock) -> None:
    resp = client.post("/api/rag", json={"question": "What is umami?"})
    assert resp.status_code == 200
    assert resp.json() == {
        "answer": "Umami is considered the fifth basic taste.",
        "sources": [
            {"text": "Umami is a basic taste...", "relevance": 0.91, "region": "Japan"},
            {"text": "Glutamate occurs in tomatoes.", "relevance": 0.42, "region": ""},
        ],
    }
    vector_client.query.assert_awaited_once_with("What is umami?", top_k=3, include_metadata=True)


def test_rag_without_sources_uses_fallback_answer(client: TestClient, vector_client: MagicMock) -> None:
    vector_client.query.return_value = []
    resp = client.post("/api/rag", json={"question": "xyzzy"})
    assert resp.status_code == 200
    assert resp.json() == {"answer": "No relevant information found.", "sources": []}


@pytest.mark.parametrize("body", [{}, {"question": ""}, {"question": 5}, ["question"]])
def test_rag_requires_question(client: TestClient, body: object) -> None:
    resp = client.post("/api/rag", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Question is required"}


def test_rag_invalid_json_body(client: TestClient) -> None:
    resp = client.post("/api/rag", content=b"not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400


@pytest.mark.parametrize(
    "exc, status, message",
    [
        (UpstreamError("Groq", "authentication", "Groq authentication failed (401)"), 401, "Authentication failed."),
        (UpstreamError("Groq", "rate_limit", "Groq rate limit exceeded"), 429, "Rate limit exceeded."),
        (ConfigurationError("GROQ_API_KEY"), 500, "Missing GROQ_API_KEY environment variable"),
        (ValidationError("query", "must be at most 500 characters"), 400, "Invalid query: must be at most 500 characters"),
        (UpstreamError("Upstash Vector", "network", "Upstash Vector network error"), 500, "Failed to process your question."),
        (RuntimeError("boom"), 500, "Failed to process your question."),
    ],
)
def test_rag_error_mapping(exc: Exception, status: int, message: str) -> None:
    with _failing_client(exc) as c:
        resp = c.post("/api/rag", json={"question": "What is umami?"})
    assert resp.status_code == status
    assert resp.json() == {"error": message}


def test_rag_too_long_question_is_rejected(client: TestClient, vector_client: MagicMock) -> None:
    resp = client.post("/api/rag", json={"question": "a" * 501})
    assert resp.status_code == 400
    assert "query" in resp.json()["error"]
    vector_client.query.assert_not_called()


def test_search_action_success(client: TestClient) -> None:
    resp = client.post("/api/v1/search", json={"query": "What is umami?", "topK": 2, "includeAnswer": False})
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert "answer" not in data["result"]
    assert data["result"]["sources"][0]["title"] == "Food Knowledge"
    assert SearchResult.model_validate(data["result"]).sources[0].region == "Japan"


def test_search_action_failure_envelope(client: TestClient) -> None:
    resp = client.post("/api/v1/search", json={"query": "x", "topK": 50})
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is False
    assert data["error"]["code"] == -32602
    assert "topK" in data["error"]["message"]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"json": ["query"]},
        {"json": "What is umami?"},
        {"content": b"not json", "headers": {"Content-Type": "application/json"}},
        {"content": b""},
    ],
)
def test_search_action_non_object_body_gets_envelope(
    client: TestClient, vector_client: MagicMock, kwargs: dict
) -> None:
    resp = client.post("/api/v1/search", **kwargs)
    assert resp.status_code == 200
    data = resp.json()
    assert data == {
        "success": False,
        "error": {"code": -32602, "message": "Invalid params: must be an object"},
    }
    vector_client.query.assert_not_called()


def test_topics(client: TestClient) -> None:
    data = client.get("/api/v1/topics").json()
    assert data["success"] is True
    assert data["topics"][0] == "Recipes & Cooking"
    assert len(data["topics"]) == 10


def test_tool_catalog(client: TestClient) -> None:
    data = client.get("/api/v1/tools").json()
    names = [t["name"] for t in data["result"]["tools"]]
    assert names == ["search_food_knowledge", "list_food_topics"]
    schema = data["result"]["tools"][0]["inputSchema"]
    assert schema["required"] == ["query"]
    assert schema["properties"]["topK"]["maximum"] == 10
    assert schema["properties"]["topK"]["type"] == "integer"


def test_tools_health_online(client: TestClient) -> None:
    data = client.get("/api/v1/tools/health").json()
    assert data == {"success": True, "status": "online", "message": "Tool server is healthy. 10 topics available."}


def test_tools_health_offline_when_no_topics() -> None:
    service = MagicMock(spec=KnowledgeService)
    service.list_topics = AsyncMock(return_value=[])
    with TestClient(create_app(knowledge_service=service)) as c:
        data = c.get("/api/v1/tools/health").json()
    assert data["status"] == "offline"
    assert data["success"] is False


def test_health_endpoints_and_request_id(client: TestClient) -> None:
    resp = client.get("/healthz", headers={"X-Request-ID": "req-1"})
    assert resp.json()["status"] == "ok"
    assert resp.headers["X-Request-ID"] == "req-1"
    assert resp.headers["X-Trace-ID"] == "req-1"
    assert client.get("/readyz").json()["status"] == "ok"


def test_metrics_mounted(client: TestClient) -> None:
    client.post("/api/rag", json={"question": "What is umami?"})
    resp = client.get("/metrics/")
    assert resp.status_code == 200
    assert "food_rag_search_requests_total" in resp.text
