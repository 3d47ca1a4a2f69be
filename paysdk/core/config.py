"""
Centralized configuration management with Pydantic Settings.
All environment variables are validated and typed.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PAYSDK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials
    api_key: Optional[str] = None

    # Transport
    api_base: str = "https://api.stripe.com"
    api_version: Optional[str] = None
    timeout: float = Field(default=30.0, gt=0)
    max_retries: int = Field(default=3, ge=1)

    # Observability
    environment: str = Field(default="development", pattern="^(development|staging|production)$")
    log_level: str = "INFO"

    @field_validator("api_base")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
