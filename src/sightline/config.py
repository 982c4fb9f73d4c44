"""Configuration management for SIGHTLINE.

Loads API credentials and pipeline settings from environment variables using
Pydantic. Secrets belong in .env (never hardcoded).

Usage:
    from sightline.config import settings

    token = settings.require("twitter_bearer_token")
    print(settings.log_level)
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MissingCredentialsError(RuntimeError):
    """Raised when a pipeline needs a setting that is not configured."""

    def __init__(self, field_name: str) -> None:
        super().__init__(
            f"{field_name} is not configured "
            f"(set {field_name.upper()} in the environment or .env)"
        )
        self.field_name = field_name


class Settings(BaseSettings):
    """SIGHTLINE configuration from environment variables.

    Loads from .env file automatically. Validates on instantiation.
    Credentials are optional here because the two pipelines are independent:
    each pipeline calls ``require`` for the credentials it needs.

    Attributes:
        twitter_bearer_token: Twitter API bearer token (follower pipeline)
        geocoding_api_key: Google Geocoding API key (follower pipeline)
        spreadsheet_id: Default published spreadsheet for the network pipeline
        twitter_handle: Default account handle for the follower pipeline
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR)
        cache_dir: Directory for exported Parquet tables
        output_dir: Directory for rendered artifacts
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown env vars
    )

    # Credentials (required per pipeline, see require())
    twitter_bearer_token: str | None = Field(
        default=None,
        min_length=10,
        description="Twitter API bearer token",
    )
    geocoding_api_key: str | None = Field(
        default=None,
        min_length=10,
        description="Google Geocoding API key",
    )

    # Default sources
    spreadsheet_id: str | None = Field(
        default=None,
        description="Published Google Sheet holding 'Systems' and 'Data Flows'",
    )
    twitter_handle: str | None = Field(
        default=None,
        description="Account whose followers are analysed",
    )

    # System Settings
    log_level: str = Field(default="INFO", description="Logging level")
    cache_dir: str = Field(default="data", description="Parquet export directory")
    output_dir: str = Field(default="output", description="Rendered artifact directory")
    http_timeout: float = Field(default=30.0, gt=0, description="HTTP timeout (seconds)")

    # Rate Limiting (pacing only, nothing is retried)
    twitter_rate_limit: int = Field(default=1, ge=1, description="Twitter requests/second")
    geocoding_rate_limit: int = Field(default=10, ge=1, description="Geocoding requests/second")

    # Follower pipeline
    follower_cap: int = Field(
        default=5000,
        ge=1,
        le=5000,
        description="Followers fetched per run (single API call)",
    )
    wordcloud_sample_size: int = Field(
        default=1000,
        ge=1,
        description="Descriptions sampled for the word cloud",
    )
    wordcloud_seed: int = Field(default=1234, description="Sampling and word cloud layout seed")
    wordcloud_max_words: int = Field(default=200, ge=1, description="Terms shown in the word cloud")
    wordcloud_min_frequency: int = Field(default=1, ge=1, description="Minimum term frequency shown")

    # Network pipeline
    layout_seed: int = Field(default=42, description="Network layout seed")
    data_types: list[str] | None = Field(
        default=None,
        description="Pre-declared data type legend order (None = derive from data)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid:
            raise ValueError(f"log_level must be one of {valid}, got {v}")
        return v_upper

    @field_validator("twitter_handle")
    @classmethod
    def strip_handle(cls, v: str | None) -> str | None:
        """Accept handles written with a leading @."""
        if v is None:
            return None
        return v.strip().lstrip("@") or None

    def require(self, field_name: str) -> Any:
        """Return a configured value or raise MissingCredentialsError."""
        value = getattr(self, field_name)
        if value is None or value == "":
            raise MissingCredentialsError(field_name)
        return value


# Global settings instance, loaded once at import
settings = Settings()
