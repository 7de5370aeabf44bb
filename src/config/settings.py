"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Registration rules
    allowed_domain: str = Field(default="gmail.com", min_length=1)
    daily_registration_limit: int = Field(default=10, ge=0)  # Rejected when count exceeds this


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
