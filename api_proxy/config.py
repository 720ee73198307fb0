"""Configuration management using pydantic-settings."""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the proxy services."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Upstream APIs
    dog_api_base_url: str = "https://dog.ceo/api"
    cat_facts_url: str = "https://catfact.ninja/facts"
    upstream_timeout: float | None = None  # None waits for the upstream indefinitely

    # Server
    host: str = "0.0.0.0"
    dog_port: int = 3000
    cat_port: int = 3001
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        """Accept level names in any case ("info", "Debug")."""
        if isinstance(value, str):
            return value.strip().upper()
        return value


# Global settings instance
settings = Settings()
