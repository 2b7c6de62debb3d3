"""12-factor configuration adapter using environment variables and TOML station lists."""

import logging
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ns_departures.adapters.ns_api.constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_MAX_JOURNEYS,
    NS_BASE_URL,
)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # NS API configuration
    ns_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("ns_api_key", "nsr_api_key"),
        description="Subscription key for the NS API portal (Ocp-Apim-Subscription-Key)",
    )
    ns_api_base_url: str = Field(default=NS_BASE_URL, description="Base URL of the NS API gateway")
    ns_api_language: str = Field(
        default=DEFAULT_LANGUAGE, description="Language for station board texts ('en' or 'nl')"
    )
    ns_api_max_journeys: int = Field(
        default=DEFAULT_MAX_JOURNEYS,
        description="Maximum number of journeys to fetch per station board",
    )
    ns_api_timeout_seconds: int = Field(
        default=10, description="Total timeout for a single NS API request in seconds"
    )

    # Pinned journey tracking
    tracker_refresh_interval_seconds: int = Field(
        default=30, description="Interval between live updates of the pinned journey in seconds"
    )
    pinned_journey_file: str = Field(
        default=".pinned_journey.json",
        description="Path of the JSON file persisting the pinned journey",
    )

    # Station list used for name and UIC lookups
    stations_file: str | None = Field(
        default="stations.example.toml",
        description="Path to TOML file with [[stations]] entries",
    )

    log_level: str = Field(default="INFO", description="Log level for the application")

    @field_validator("ns_api_language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Validate the language is one the NS API supports."""
        if v.lower() not in ("en", "nl"):
            raise ValueError("ns_api_language must be either 'en' or 'nl'")
        return v.lower()

    @field_validator("tracker_refresh_interval_seconds", "ns_api_max_journeys")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate that counts and intervals are positive."""
        if v <= 0:
            raise ValueError("value must be greater than 0")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level is a known logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Create a configuration that ignores .env files, for use in tests."""
        return cls(_env_file=None, **overrides)
