"""Client interfaces for the vector index and the chat model."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class VectorHit:
    id: str
    score: float | None = None
    metadata: dict[str, Any] | None = None


@dataclass
class ChatChoice:
    content: str | None = None


@dataclass
class ChatCompletion:
    choices: list[ChatChoice] = field(default_factory=list)


class VectorIndex(ABC):
    @abstractmethod
    async def query(
        self, data: str, top_k: int, include_metadata: bool = True
    ) -> list[VectorHit]:
        """Embed data server-side and return nearest hits, best first."""
        ...


class ChatModel(ABC):
    @abstractmethod
    async def complete(
        self,
        messages: list[dict[str, str]],
        *,
        model: str,
        temperature: float,
        max_completion_tokens: int,
    ) -> ChatCompletion:
        """Run one chat completion request."""
        ...
