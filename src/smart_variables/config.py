"""Centralised configuration loaded from environment / .env file."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Root application settings – populated from env vars / .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Server ───────────────────────────────────────────────────────
    api_host: str = Field(default="127.0.0.1", validation_alias="API_HOST")
    api_port: int = Field(default=8080, validation_alias="API_PORT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_llm_io: bool = Field(default=False, validation_alias="LOG_LLM_IO")
    log_max_chars: int = Field(default=3000, validation_alias="LOG_MAX_CHARS")

    # ── Transport tuning ─────────────────────────────────────────────
    request_timeout_secs: float = Field(default=30.0, validation_alias="REQUEST_TIMEOUT_SECS")
    max_retries: int = Field(default=2, validation_alias="MAX_RETRIES")
    retry_backoff_secs: float = Field(default=1.5, validation_alias="RETRY_BACKOFF_SECS")

    # ── Response caching ─────────────────────────────────────────────
    enable_request_cache: bool = Field(default=True, validation_alias="ENABLE_REQUEST_CACHE")
    cache_ttl_secs: int = Field(default=300, validation_alias="CACHE_TTL_SECS")

    # ── Style inference ──────────────────────────────────────────────
    context_radius: int = Field(default=10, validation_alias="CONTEXT_RADIUS")
    candidate_count: int = Field(default=6, validation_alias="CANDIDATE_COUNT")
    preferred_style: str = Field(default="auto", validation_alias="PREFERRED_STYLE")

    # ── Language model ───────────────────────────────────────────────
    llm_api_key: str = Field(default="", validation_alias="LLM_API_KEY")
    llm_base_url: str = Field(default="https://api.openai.com/v1", validation_alias="LLM_BASE_URL")
    llm_model: str = Field(default="gpt-4o-mini", validation_alias="LLM_MODEL")

    # ── Persistent configuration store ───────────────────────────────
    config_dir: Path = Field(
        default=Path.home() / ".config" / "smart-variables",
        validation_alias="CONFIG_DIR",
    )
    workspace_dir: Path = Field(default=Path(".smart-variables"), validation_alias="WORKSPACE_DIR")


settings = Settings()
