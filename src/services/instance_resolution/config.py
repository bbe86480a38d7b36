"""
Instance Resolution Service Configuration

Configuration settings using pydantic-settings for environment variable support.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class InstanceServiceConfig(BaseSettings):
    """
    Configuration for DB instance resolution.

    Reads from environment variables with INSTANCE_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="INSTANCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Management API
    endpoint_url: str = Field(
        default="http://localhost:4566",
        description="Base URL of the management API",
    )
    api_key: str | None = Field(
        default=None,
        description="Optional bearer token for the management API",
    )
    client_generation: Literal["v1", "v2"] = Field(
        default="v2",
        description="API client generation: v1 (callback pages) or v2 (typed paginator)",
    )
    page_size: int | None = Field(
        default=None,
        ge=20,
        le=100,
        description="MaxRecords per describe page (API default when unset)",
    )

    # Timeouts and retries
    timeout_seconds: float | None = Field(
        default=30.0,
        description="Deadline for a whole resolution, including fallback",
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout for each HTTP request",
    )
    retry_max_attempts: int = Field(
        default=3,
        ge=1,
        description="Attempts for connection failures and throttling faults",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


def load_config() -> InstanceServiceConfig:
    """Load configuration from environment."""
    return InstanceServiceConfig()
