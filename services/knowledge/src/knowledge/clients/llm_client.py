"""HTTP client for Groq's OpenAI-compatible chat completions API."""
from typing import Any

import httpx

from shared.http_client import UpstreamError, create_http_client, request_json

from knowledge.clients.base import ChatChoice, ChatCompletion, ChatModel

SERVICE_NAME = "Groq"


class GroqChatClient(ChatModel):
    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.groq.com/openai/v1",
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def complete(
        self,
        messages: list[dict[str, str]],
        *,
        model: str,
        temperature: float,
        max_completion_tokens: int,
    ) -> ChatCompletion:
        payload = {
            "model": model,
            "messages": messages,
            "temperature": temperature,
            "max_completion_tokens": max_completion_tokens,
        }
        headers = {"Authorization": f"Bearer {self._api_key}"}
        async with create_http_client(
            timeout=self._timeout, headers=headers, transport=self._transport
        ) as client:
            body = await request_json(
                client,
                "POST",
                f"{self._base_url}/chat/completions",
                service=SERVICE_NAME,
                json=payload,
            )
        return _parse_completion(body)


def _parse_completion(body: Any) -> ChatCompletion:
    choices = body.get("choices") if isinstance(body, dict) else None
    if not isinstance(choices, list):
        raise UpstreamError(SERVICE_NAME, "bad_response", f"{SERVICE_NAME} response has no choices")
    parsed = []
    for c in choices:
        message = c.get("message") if isinstance(c, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        parsed.append(ChatChoice(content=content if isinstance(content, str) else None))
    return ChatCompletion(choices=parsed)
