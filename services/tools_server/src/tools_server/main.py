"""Tools server entrypoint."""
import sys

import structlog

from shared.logging import configure_logging

from tools_server.config import ToolsServerSettings
from tools_server.server import create_server

_settings: ToolsServerSettings | None = None


def get_settings() -> ToolsServerSettings:
    global _settings
    if _settings is None:
        _settings = ToolsServerSettings()
    return _settings


def main() -> None:
    settings = get_settings()
    # stdout carries the protocol under stdio transport
    configure_logging(json_logs=settings.json_logs, level=settings.log_level, stream=sys.stderr)
    mcp = create_server(name=settings.name)
    structlog.get_logger(__name__).info(
        "tools_server_starting", transport=settings.transport, port=settings.port, path=settings.path
    )
    if settings.transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(transport="http", host=settings.host, port=settings.port, path=settings.path)


if __name__ == "__main__":
    main()
