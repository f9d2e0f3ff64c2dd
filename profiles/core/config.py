"""
Configuration management for the profiles service.

Environment-driven configuration using Pydantic's `BaseSettings`. The registry,
the API and the command line entry points all read the shared `settings`
instance.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, List

from pydantic import Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    # General application settings
    API_TITLE: str = "Profiles API"
    API_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = Field("development", pattern=r"^(development|staging|production)$")
    LOG_LEVEL: str = Field("INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    # HTTP server
    HOST: str = "0.0.0.0"
    PORT: PositiveInt = 8080
    ALLOWED_ORIGINS: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["*"])

    # Registry summaries
    NAME_SEPARATOR: str = ","

    @field_validator("ALLOWED_ORIGINS", mode="before")
    def _split_origins(cls, value: str | List[str]) -> List[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("LOG_LEVEL", mode="before")
    def _upper_log_level(cls, value: str) -> str:
        if isinstance(value, str):
            return value.upper()
        return value


@lru_cache()
def get_settings() -> Settings:
    """Return a cached `Settings` instance."""

    return Settings()


settings = get_settings()
