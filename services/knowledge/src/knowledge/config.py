"""Knowledge engine configuration."""
from pydantic import Field
from pydantic_settings import SettingsConfigDict

from shared.config import BaseAppSettings


class KnowledgeSettings(BaseAppSettings):
    model_config = SettingsConfigDict(env_prefix="KNOWLEDGE_")

    upstash_vector_rest_url: str | None = Field(None, validation_alias="UPSTASH_VECTOR_REST_URL")
    upstash_vector_rest_token: str | None = Field(None, validation_alias="UPSTASH_VECTOR_REST_TOKEN")
    groq_api_key: str | None = Field(None, validation_alias="GROQ_API_KEY")
    groq_base_url: str = "https://api.groq.com/openai/v1"
    vector_timeout_seconds: float = 30.0
    llm_timeout_seconds: float = 60.0
