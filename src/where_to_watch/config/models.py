"""Configuration data models."""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TMDbConfig(BaseModel):
    """TMDb API configuration."""

    api_key: str = Field(..., description="TMDb API key")
    base_url: str = Field(default="https://api.themoviedb.org/3", description="TMDb API base URL")
    image_base_url: str = Field(
        default="https://image.tmdb.org/t/p", description="TMDb image CDN base URL"
    )
    language: str = Field(default="en-US", description="Default language for requests")
    region: str = Field(default="US", description="Reference region for providers and releases")
    timeout: int = Field(default=10, gt=0, description="Request timeout in seconds")
    retry_attempts: int = Field(default=3, ge=1, description="Attempts per request")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Expand environment variables in API key."""
        return os.path.expandvars(v)

    @field_validator("region")
    @classmethod
    def validate_region(cls, v: str) -> str:
        """Validate region code."""
        if len(v) != 2 or not v.isalpha():
            raise ValueError(f"Region must be a two-letter country code, got {v!r}")
        return v.upper()

    @field_validator("base_url", "image_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Drop trailing slashes so paths can be appended directly."""
        return v.rstrip("/")


class HistoryConfig(BaseModel):
    """Local search and visit history configuration."""

    enabled: bool = Field(default=True, description="Record searches and visits")
    path: str = Field(
        default="~/.where_to_watch/history.json", description="History file location"
    )
    max_searches: int = Field(default=10, gt=0, description="Searches kept in history")
    display_limit: int = Field(default=5, gt=0, description="Searches shown by default")

    @field_validator("path")
    @classmethod
    def expand_path(cls, v: str) -> str:
        """Expand environment variables and user home in path."""
        return os.path.expanduser(os.path.expandvars(v))


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )
    file: Optional[str] = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, gt=0, description="Maximum log file size in MB")
    backup_count: int = Field(default=5, ge=0, description="Number of backup log files")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Logging level must be one of: {allowed}")
        return v.upper()


class Config(BaseModel):
    """Main configuration model."""

    tmdb: TMDbConfig = Field(..., description="TMDb configuration")
    history: HistoryConfig = Field(
        default_factory=HistoryConfig, description="History configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
    )
