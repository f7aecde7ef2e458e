"""Gateway service configuration."""
from pydantic_settings import SettingsConfigDict

from shared.config import BaseAppSettings


class GatewaySettings(BaseAppSettings):
    model_config = SettingsConfigDict(env_prefix="GATEWAY_")

    host: str = "0.0.0.0"
    port: int = 8000
    json_logs: bool = True
    log_level: str = "INFO"
