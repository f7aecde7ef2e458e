"""Request correlation and access logging for the HTTP services."""
import time
import uuid
from collections.abc import Iterable
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from shared.logging import clear_request_context, set_request_context

REQUEST_ID_HEADER = "X-Request-ID"
TRACE_ID_HEADER = "X-Trace-ID"
MAX_ID_LENGTH = 128
QUIET_PATHS = ("/healthz", "/readyz", "/metrics")

log = structlog.get_logger(__name__)


def _header_id(request: Request, name: str) -> str | None:
    value = (request.headers.get(name) or "").strip()
    if not value or len(value) > MAX_ID_LENGTH:
        return None
    return value


def get_request_id_from_headers(request: Request) -> str | None:
    return _header_id(request, REQUEST_ID_HEADER)


def get_trace_id_from_headers(request: Request) -> str | None:
    return _header_id(request, TRACE_ID_HEADER)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Correlate each request with request_id/trace_id and log one access event.

    Incoming ids are reused when present and at most MAX_ID_LENGTH characters;
    otherwise a fresh request id is generated and the trace id follows it.
    Health checks and metric scrapes under ``quiet_paths`` are not logged.
    """

    def __init__(self, app: ASGIApp, quiet_paths: Iterable[str] = QUIET_PATHS) -> None:
        super().__init__(app)
        self.quiet_paths = tuple(quiet_paths)

    def _is_quiet(self, path: str) -> bool:
        return any(path == p or path.startswith(p + "/") for p in self.quiet_paths)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = get_request_id_from_headers(request) or str(uuid.uuid4())
        trace_id = get_trace_id_from_headers(request) or request_id
        set_request_context(request_id=request_id, trace_id=trace_id)
        path = request.url.path
        t0 = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception:
                log.exception("http_request_failed", method=request.method, path=path)
                raise
            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers[TRACE_ID_HEADER] = trace_id
            if not self._is_quiet(path):
                log.info(
                    "http_request",
                    method=request.method,
                    path=path,
                    status=response.status_code,
                    duration_ms=round((time.perf_counter() - t0) * 1000, 1),
                )
            return response
        finally:
            clear_request_context()
