"""
Configuration Settings

This module defines application configuration using Pydantic Settings.
All configuration is loaded from environment variables or .env file.
On Azure, Application Settings arrive as environment variables.

Design Decisions:
- Uses pydantic-settings for type-safe configuration
- The domain allow-list ships disabled; turn it on with
  DOMAIN_ALLOWLIST_ENABLED=true and set ALLOWED_DOMAINS as a JSON list
"""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "settings"]


class EnvSettingsOptions(Enum):
    """Environment options for deployment."""
    production = "production"
    staging = "staging"
    development = "dev"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Project Configuration
    ENV_SETTING: EnvSettingsOptions = Field(
        default=EnvSettingsOptions.development,
        description="Environment setting (production, staging, dev)"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Level applied to the 'smmsg' logger"
    )

    # URL Validation
    DOMAIN_ALLOWLIST_ENABLED: bool = Field(
        default=False,
        description="Reject request URLs whose host is not in ALLOWED_DOMAINS"
    )
    ALLOWED_DOMAINS: List[str] = Field(
        default=["localhost", "fiasse.org"],
        description="Permitted hosts; subdomains of an entry are permitted too"
    )
    MAX_URL_LENGTH: int = Field(
        default=2048,
        description="Maximum accepted request URL length"
    )

    # Log Sanitization
    MAX_LOGGED_URL_LENGTH: int = Field(
        default=200,
        description="Sanitized URLs longer than this are truncated in logs"
    )


settings = Settings()
