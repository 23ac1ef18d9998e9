"""Application settings using pydantic-settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_MODEL = "openai/gpt-oss-20b"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Application
    # ==========================================================================
    app_name: str = "Edit Intent Planner"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # ==========================================================================
    # LLM Providers
    # ==========================================================================
    # Groq (OpenAI-compatible)
    groq_api_key: str = Field(default="")
    groq_base_url: str = "https://api.groq.com/openai/v1"

    # Anthropic
    anthropic_api_key: str = Field(default="")
    anthropic_base_url: str = "https://api.anthropic.com/v1"
    anthropic_version: str = "2023-06-01"

    # OpenAI
    openai_api_key: str = Field(default="")
    openai_base_url: str | None = None

    # Google Generative AI
    google_api_key: str = Field(default="")
    google_base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    # Generation
    default_model: str = DEFAULT_MODEL
    llm_timeout_seconds: float = 120.0
    llm_max_tokens: int = 4096

    # ==========================================================================
    # API
    # ==========================================================================
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = Field(default=["http://localhost:3000"])


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
