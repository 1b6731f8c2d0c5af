"""
Settings module for the Automation Advisor.

Environment-based configuration with sensible defaults.
All settings can be overridden via environment variables.
"""

import os
from functools import lru_cache
from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for development.
    In production, the LLM key, candidate store URL and Redis host
    should be set via environment variables.
    """

    # Environment
    environment: str = Field(
        default="development",
        description="Environment name (development, staging, production)"
    )
    debug: bool = Field(
        default=True,
        description="Enable debug mode"
    )

    # LLM (completion service) Configuration
    llm_provider: str = Field(
        default="openai",
        description="LLM provider used for job description analysis"
    )
    llm_model: str = Field(
        default="gpt-4o-mini",
        description="LLM model name"
    )
    llm_api_key: Optional[str] = Field(
        default=None,
        description="LLM API key (required, set via LLM_API_KEY env var)"
    )
    llm_base_url: Optional[str] = Field(
        default=None,
        description="Optional base URL for OpenAI-compatible endpoints"
    )
    llm_temperature: float = Field(
        default=0.3,
        description="Sampling temperature for the analysis call"
    )
    llm_max_tokens: int = Field(
        default=4000,
        description="Max tokens for the single batched analysis call"
    )
    llm_timeout_seconds: float = Field(
        default=60.0,
        description="Timeout for the completion call; on expiry the parser falls back"
    )
    llm_max_input_chars: int = Field(
        default=2000,
        description="Job text is truncated to this many characters before prompting"
    )

    # Candidate store (PostgREST-style REST API)
    candidate_store_url: str = Field(
        default="http://127.0.0.1:54321",
        description="Base URL of the candidate store REST API"
    )
    candidate_store_api_key: Optional[str] = Field(
        default=None,
        description="API key sent as apikey/Bearer header"
    )
    candidate_store_timeout: float = Field(
        default=15.0,
        description="Candidate store request timeout in seconds"
    )
    candidate_table: str = Field(
        default="unified_workflows",
        description="Table holding consolidated candidate solutions"
    )
    candidate_row_limit: int = Field(
        default=1000,
        description="Upper bound of rows read per recommendation request"
    )
    candidate_verification_status: str = Field(
        default="verified",
        description="Only candidates with this status are considered"
    )
    legacy_cache_table: str = Field(
        default="workflow_cache",
        description="Table holding the legacy per-source workflow cache"
    )
    legacy_cache_version: str = Field(
        default="v1.5.0",
        description="Legacy cache version to read"
    )
    legacy_cache_sources: List[str] = Field(
        default_factory=lambda: ["github", "n8n.io", "ai-enhanced"],
        description="Sources read from the legacy cache"
    )

    # Redis Configuration (recommendation cache)
    redis_host: str = Field(
        default="127.0.0.1",
        description="Redis host"
    )
    redis_port: int = Field(
        default=6379,
        description="Redis port"
    )
    redis_db: int = Field(
        default=4,
        description="Redis database number"
    )
    redis_password: Optional[str] = Field(
        default=None,
        description="Redis password (set via REDIS_PASSWORD env var)"
    )
    redis_socket_timeout: int = Field(
        default=5,
        description="Redis socket timeout in seconds"
    )
    redis_connect_timeout: int = Field(
        default=5,
        description="Redis connection timeout in seconds"
    )
    cache_key_prefix: str = Field(
        default="advisor",
        description="Prefix for every cache key"
    )
    recommendation_cache_ttl_ms: int = Field(
        default=7 * 24 * 60 * 60 * 1000,
        description="TTL for cached recommendations (7 days)"
    )

    # Recommendations
    default_top_k: int = Field(
        default=6,
        description="Number of recommendations returned when top_k is not given"
    )

    # Feature Flags
    unified_workflow_read: bool = Field(
        default=True,
        description="Read consolidated candidates (off: legacy degraded mode)"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @property
    def is_llm_configured(self) -> bool:
        """Check whether a completion service key is available."""
        return bool(self.llm_api_key)

    @property
    def redis_url(self) -> str:
        """Get Redis URL."""
        auth = f":{self.redis_password}@" if self.redis_password else ""
        return f"redis://{auth}{self.redis_host}:{self.redis_port}/{self.redis_db}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are cached for performance. To reload, use:
        get_settings.cache_clear()

    Returns:
        Settings instance
    """
    return Settings()


def load_settings_from_env(env_file: str = ".env") -> Settings:
    """Load settings from a specific env file."""
    if os.path.exists(env_file):
        from dotenv import load_dotenv
        load_dotenv(env_file)
    get_settings.cache_clear()
    return get_settings()
