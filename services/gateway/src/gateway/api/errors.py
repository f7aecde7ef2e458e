"""Mapping of engine failures to HTTP responses."""
from knowledge.errors import ConfigurationError, UpstreamError, ValidationError

# JSON-RPC "invalid params", used by the action-style endpoints.
INVALID_PARAMS_CODE = -32602

GENERIC_FAILURE = "Failed to process your question."


def rag_error(exc: Exception) -> tuple[int, str]:
    """Status code and user-facing message for a failed /api/rag call."""
    if isinstance(exc, ValidationError):
        return 400, str(exc)
    if isinstance(exc, ConfigurationError):
        return 500, str(exc)
    if isinstance(exc, UpstreamError):
        if exc.kind == "authentication":
            return 401, "Authentication failed."
        if exc.kind == "rate_limit":
            return 429, "Rate limit exceeded."
    return 500, GENERIC_FAILURE
