"""Environment-based application settings. Read-only; no business logic."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="chunk-preview-service", description="Service name")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Runtime environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Log level name")

    # Server
    host: str = Field(default="0.0.0.0", description="Listen host")
    port: int = Field(default=8000, ge=1, le=65535, description="Listen port")

    # Chunk preview limits
    preview_max_text_chars: int = Field(
        default=1_000_000, ge=1, description="Largest text accepted by /chunk-preview (characters)"
    )
    preview_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Wall-clock budget for a single preview request (seconds)"
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance. Use for app lifetime."""
    return Settings()
