"""HTTP client for the Upstash Vector REST API."""
from typing import Any

import httpx

from shared.http_client import UpstreamError, create_http_client, request_json

from knowledge.clients.base import VectorHit, VectorIndex

SERVICE_NAME = "Upstash Vector"


class UpstashVectorClient(VectorIndex):
    def __init__(
        self,
        url: str,
        token: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._transport = transport

    async def query(
        self, data: str, top_k: int, include_metadata: bool = True
    ) -> list[VectorHit]:
        payload = {"data": data, "topK": top_k, "includeMetadata": include_metadata}
        headers = {"Authorization": f"Bearer {self._token}"}
        async with create_http_client(
            timeout=self._timeout, headers=headers, transport=self._transport
        ) as client:
            body = await request_json(
                client, "POST", f"{self._url}/query-data", service=SERVICE_NAME, json=payload
            )
        return _parse_hits(body)


def _parse_hits(body: Any) -> list[VectorHit]:
    results = body.get("result") if isinstance(body, dict) else None
    if not isinstance(results, list):
        raise UpstreamError(SERVICE_NAME, "bad_response", f"{SERVICE_NAME} response has no result list")
    hits = []
    for r in results:
        if not isinstance(r, dict):
            continue
        score = r.get("score")
        metadata = r.get("metadata")
        hits.append(
            VectorHit(
                id=str(r.get("id", "")),
                score=float(score) if isinstance(score, (int, float)) else None,
                metadata=metadata if isinstance(metadata, dict) else None,
            )
        )
    return hits
