"""
Dream Cinema Configuration

Pydantic settings for the video-generation provider, polling policy and API.
Values come from the environment or a local .env file.
"""

from functools import lru_cache
from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from .retry import BackoffPolicy


class Settings(BaseSettings):
    """Application settings."""

    # Provider (MiniMax Hailuo)
    hailuo_api_key: str = Field(
        default="",
        validation_alias=AliasChoices(
            "HAILUOAI_API_KEY", "EXPO_PUBLIC_HAILUOAI_API_KEY", "hailuo_api_key"
        ),
    )
    provider_base_url: str = Field(default="https://api.minimax.chat/v1")
    provider_model: str = Field(default="video-01")
    request_timeout: float = Field(default=30.0)
    health_check_timeout: float = Field(default=5.0)

    # Polling while the job is still processing
    poll_base_delay: float = Field(default=3.0)
    poll_growth: float = Field(default=1.3)
    poll_max_delay: float = Field(default=15.0)
    poll_max_attempts: int = Field(default=40)

    # Retrying failed status calls
    network_retry_delay: float = Field(default=5.0)
    network_max_retries: int = Field(default=40)

    # Overall wall-clock budget for one generation, 0 disables it
    generation_deadline: float = Field(default=0.0)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    log_level: str = Field(default="INFO")
    cors_origins: List[str] = Field(
        default=["http://localhost:8081", "http://localhost:19006"]
    )
    generate_rate_limit: str = Field(default="10/minute")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
        populate_by_name = True

    @property
    def has_provider_key(self) -> bool:
        return bool(self.hailuo_api_key.strip())

    @property
    def poll_policy(self) -> BackoffPolicy:
        """Backoff used between 'processing' polls."""
        return BackoffPolicy(
            max_attempts=self.poll_max_attempts,
            base_delay=self.poll_base_delay,
            max_delay=self.poll_max_delay,
            exponential_base=self.poll_growth,
        )

    @property
    def network_retry_policy(self) -> BackoffPolicy:
        """Flat backoff used after a failed status call."""
        return BackoffPolicy(
            max_attempts=self.network_max_retries,
            base_delay=self.network_retry_delay,
            max_delay=self.network_retry_delay,
            exponential_base=1.0,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
