from knowledge.clients.base import ChatChoice, ChatCompletion, ChatModel, VectorHit, VectorIndex
from knowledge.clients.llm_client import GroqChatClient
from knowledge.clients.registry import ClientRegistry
from knowledge.clients.vector_client import UpstashVectorClient

__all__ = [
    "ChatChoice",
    "ChatCompletion",
    "ChatModel",
    "ClientRegistry",
    "GroqChatClient",
    "UpstashVectorClient",
    "VectorHit",
    "VectorIndex",
]
