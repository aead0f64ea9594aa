"""
Settings loaded from the environment (and an optional .env file).

Use get_settings() to access the cached instance.

Provider credentials:
    - SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET
    - TMDB_API_KEY
    - TUMBLR_API_KEY
    - UNSPLASH_ACCESS_KEY

A provider whose credentials are missing is simply not built; the rest of
the pipeline still runs.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Provider credentials
    # ==========================================================================
    spotify_client_id: Optional[str] = Field(default=None)
    spotify_client_secret: Optional[str] = Field(default=None)
    tmdb_api_key: Optional[str] = Field(default=None)
    tumblr_api_key: Optional[str] = Field(default=None)
    unsplash_access_key: Optional[str] = Field(default=None)

    # ==========================================================================
    # Provider calls
    # ==========================================================================
    provider_timeout: float = Field(
        default=10.0, gt=0, description="Upper bound in seconds for one provider call"
    )
    request_delay: float = Field(
        default=0.2, ge=0, description="Pause between sequential calls to one provider"
    )
    max_term_queries: int = Field(
        default=3, ge=0, description="How many targeted search terms to query per provider"
    )
    max_retries: int = Field(
        default=3, ge=1, description="Attempts per call when a provider rate-limits us"
    )

    # ==========================================================================
    # Detection / output
    # ==========================================================================
    default_min_confidence: float = Field(default=0.3, ge=0.0, le=1.0)
    default_limit: int = Field(default=20, ge=1)

    # ==========================================================================
    # Text classifier
    # ==========================================================================
    use_llm_classifier: bool = Field(default=False)
    ollama_model: str = Field(default="qwen2.5:7b")


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()
