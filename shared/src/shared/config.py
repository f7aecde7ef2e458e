"""Base configuration and env handling."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """Base settings with common env config."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def env_name(self, field_name: str) -> str:
        """Environment variable a field is read from (alias or prefixed name)."""
        field = type(self).model_fields[field_name]
        if isinstance(field.validation_alias, str):
            return field.validation_alias
        prefix = self.model_config.get("env_prefix", "") or ""
        return f"{prefix}{field_name}".upper()

    def first_missing(self, *field_names: str) -> str | None:
        """Return the env name of the first unset or blank field, else None."""
        for name in field_names:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                return self.env_name(name)
        return None
