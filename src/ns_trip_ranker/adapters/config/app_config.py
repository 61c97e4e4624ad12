"""12-factor configuration adapter using environment variables."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # NS API configuration
    ns_api_key: str = Field(
        default="", description="Subscription key sent as Ocp-Apim-Subscription-Key"
    )
    ns_api_base_url: str = Field(
        default="https://gateway.apiportal.ns.nl/reisinformatie-api/api",
        description="Base URL of the NS reisinformatie API",
    )
    ns_api_timeout: int = Field(default=10, description="Timeout for NS API requests in seconds")

    # Journey detail cache configuration
    # If not set, an in-memory cache scoped to the process is used
    nsproductcache_table_name: str | None = Field(
        default=None, description="DynamoDB table caching journey details by product number"
    )
    aws_region: str | None = Field(default=None, description="AWS region of the cache table")

    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("ns_api_timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError("ns_api_timeout must be a positive number of seconds")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @property
    def trips_url(self) -> str:
        return f"{self.ns_api_base_url.rstrip('/')}/v3/trips"

    @property
    def journey_url(self) -> str:
        return f"{self.ns_api_base_url.rstrip('/')}/v2/journey"
