"""Folio AI — Application Configuration."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, enum.Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Centralised, validated configuration loaded from environment / .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        # An empty variable falls through to the next alias
        env_ignore_empty=True,
    )

    # ── Application ──────────────────────────────────────────
    app_name: str = "folio-ai"
    app_env: Environment = Environment.DEVELOPMENT
    app_debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    # Public URL + title sent to OpenRouter for attribution
    app_url: str = Field(
        "http://localhost:3000",
        validation_alias=AliasChoices("app_url", "next_public_app_url"),
    )
    app_title: str = "GitHubFolio"

    # ── Text-generation providers ────────────────────────────
    openrouter_api_key: str = Field(
        "",
        validation_alias=AliasChoices(
            "openrouter_api_key", "next_public_openrouter_api_key"
        ),
    )
    gemini_api_key: str = Field(
        "",
        validation_alias=AliasChoices("gemini_api_key", "next_public_gemini_api_key"),
    )

    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_model: str = "anthropic/claude-3-haiku"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_model: str = "gemini-pro"

    provider_timeout_seconds: float = 60.0

    # ── Derived helpers ──────────────────────────────────────
    @property
    def is_production(self) -> bool:
        return self.app_env == Environment.PRODUCTION

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, v: str) -> str:
        return v.upper()

    @field_validator("openrouter_api_key", "gemini_api_key")
    @classmethod
    def _strip_keys(cls, v: str) -> str:
        return v.strip()

    @field_validator("openrouter_base_url", "gemini_base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


def get_settings(**overrides: Any) -> Settings:
    """Factory that allows test-time overrides."""
    return Settings(**overrides)
