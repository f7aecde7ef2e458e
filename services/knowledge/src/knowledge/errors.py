"""Error taxonomy of the knowledge engine."""
from shared.http_client import UpstreamError


class KnowledgeError(Exception):
    """Base class for errors raised by the engine itself."""


class ValidationError(KnowledgeError):
    """Search input is malformed or out of bounds."""

    def __init__(self, field: str, constraint: str) -> None:
        super().__init__(f"Invalid {field}: {constraint}")
        self.field = field
        self.constraint = constraint


class ConfigurationError(KnowledgeError):
    """A required credential or endpoint is not configured."""

    def __init__(self, setting: str) -> None:
        super().__init__(f"Missing {setting} environment variable")
        self.setting = setting


__all__ = ["ConfigurationError", "KnowledgeError", "UpstreamError", "ValidationError"]
