"""Tools server configuration."""
from typing import Literal

from pydantic_settings import SettingsConfigDict

from shared.config import BaseAppSettings


class ToolsServerSettings(BaseAppSettings):
    model_config = SettingsConfigDict(env_prefix="TOOLS_SERVER_")

    name: str = "food-rag"
    transport: Literal["http", "stdio"] = "http"
    host: str = "0.0.0.0"
    port: int = 8003
    path: str = "/api/mcp"
    json_logs: bool = True
    log_level: str = "INFO"
