"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from propvest.core.exceptions import ConfigurationError


class AppSettings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON lines")

    # Offer assessment
    target_cap_rate_pct: float = Field(default=6.0, gt=0, le=100, description="Cap rate a fair price must yield")
    negotiation_margin_pct: float = Field(default=10.0, ge=0, le=100, description="Premium over fair value still worth an offer")

    # Export
    export_dir: str = Field(default="results", description="Directory for exported analyses")

    model_config = {
        "env_prefix": "PROPVEST_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> AppSettings:
    """Get cached application settings.

    Raises:
        ConfigurationError: An environment variable holds an invalid value
    """
    try:
        return AppSettings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid PROPVEST_ settings: {e}") from e
