"""HTTP client factory and typed errors for upstream JSON APIs."""
from typing import Any, Literal

import httpx

ErrorKind = Literal["authentication", "rate_limit", "network", "bad_response", "service"]


class UpstreamError(Exception):
    """Raised when an upstream service call fails.

    ``kind`` lets callers classify the failure without matching on message text.
    """

    def __init__(
        self,
        service: str,
        kind: ErrorKind,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.service = service
        self.kind = kind
        self.message = message
        self.status_code = status_code


def classify_status(status_code: int) -> ErrorKind:
    if status_code in (401, 403):
        return "authentication"
    if status_code == 429:
        return "rate_limit"
    return "service"


def _error_detail(resp: httpx.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        return resp.text[:200]
    if isinstance(data, dict):
        err = data.get("error")
        if isinstance(err, dict):
            return str(err.get("message") or err)
        if err:
            return str(err)
    return resp.text[:200]


def raise_for_upstream(resp: httpx.Response, service: str) -> None:
    """Convert a non-2xx response into UpstreamError."""
    if resp.is_success:
        return
    kind = classify_status(resp.status_code)
    detail = _error_detail(resp)
    if kind == "authentication":
        message = f"{service} authentication failed ({resp.status_code}): {detail}"
    elif kind == "rate_limit":
        message = f"{service} rate limit exceeded: {detail}"
    else:
        message = f"{service} request failed ({resp.status_code}): {detail}"
    raise UpstreamError(service, kind, message, status_code=resp.status_code)


def create_http_client(
    timeout: float = 30.0,
    headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create async HTTP client with timeout. Single attempt, no retries."""
    if transport is None:
        transport = httpx.AsyncHTTPTransport(retries=0)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        headers=headers,
        transport=transport,
    )


async def request_json(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    service: str,
    json: Any = None,
) -> Any:
    """Perform request and decode JSON body, raising UpstreamError on failure."""
    try:
        resp = await client.request(method, url, json=json)
    except httpx.TimeoutException as e:
        raise UpstreamError(service, "network", f"{service} request timed out: {e}") from e
    except httpx.TransportError as e:
        raise UpstreamError(service, "network", f"{service} network error: {e}") from e
    raise_for_upstream(resp, service)
    try:
        return resp.json()
    except ValueError as e:
        raise UpstreamError(
            service,
            "bad_response",
            f"{service} returned invalid JSON",
            status_code=resp.status_code,
        ) from e
