import os

from pathlib import Path
from typing import Any, List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    def model_post_init(self, __context: Any) -> None:
        """Pick up the key name used by the old Next.js client."""

        super().model_post_init(__context)

        if not self.inch_api_key:
            fallback = os.getenv("NEXT_PUBLIC_1INCH_API_KEY")
            if fallback:
                object.__setattr__(self, "inch_api_key", fallback)

    # Server Settings
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")

    # 1inch
    inch_api_key: str = Field(
        default="",
        description="1inch developer portal API key",
        validation_alias=AliasChoices("inch_api_key", "INCH_API_KEY", "ONEINCH_API_KEY"),
    )
    inch_api_base_url: str = Field(
        default="https://api.1inch.dev",
        description="Base URL for the 1inch API family",
    )

    # Twitter
    twitter_bearer_token: str = Field(default="", description="Twitter API v2 bearer token")
    twitter_api_base_url: str = Field(
        default="https://api.twitter.com",
        description="Base URL for the Twitter API",
    )

    # Timeouts
    request_timeout_seconds: float = Field(default=10, gt=0, description="Default upstream request timeout")
    portfolio_timeout_seconds: float = Field(
        default=15,
        gt=0,
        description="Upstream timeout for portfolio and history requests",
    )
    aggregate_timeout_seconds: float = Field(
        default=30,
        gt=0,
        description="Wall-clock budget for the multi-chain portfolio fan-out",
    )

    # Token metadata cache
    token_cache_max_size: int = Field(
        default=0,
        ge=0,
        description="Maximum cached token entries (0 keeps every entry for the process lifetime)",
    )

    # Multi-chain portfolio
    portfolio_chain_ids: List[int] = Field(
        default_factory=list,
        description="Restrict the multi-chain portfolio to these chain IDs (empty = all configured chains)",
    )

    @property
    def has_inch_key(self) -> bool:
        return bool(self.inch_api_key)

    @property
    def has_twitter_token(self) -> bool:
        return bool(self.twitter_bearer_token)


# Global settings instance
settings = Settings()
