"""Configuration management using Pydantic Settings."""

from typing import ClassVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from commit_embed.shared.exceptions import ConfigError

# Singleton instance
_settings: "Settings | None" = None


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # GitHub API
    github_api_base_url: str = "https://api.github.com"
    request_timeout_seconds: float = 10.0
    user_agent: str = "commit-embed"

    # Card rendering
    display_timezone: str = "UTC"

    # Application settings
    log_level: str = "INFO"

    # Valid log levels
    VALID_LOG_LEVELS: ClassVar[set[str]] = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the allowed values."""
        v_upper = v.upper()
        if v_upper not in cls.VALID_LOG_LEVELS:
            raise ConfigError(
                f"Invalid log level: {v}. Must be one of {', '.join(sorted(cls.VALID_LOG_LEVELS))}"
            )
        return v_upper

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_request_timeout(cls, v: float) -> float:
        """Validate request timeout is within acceptable range (0-120 seconds)."""
        if not 0 < v <= 120:
            raise ConfigError(f"Request timeout must be between 0 and 120 seconds, got {v}")
        return v

    @field_validator("github_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("display_timezone")
    @classmethod
    def validate_display_timezone(cls, v: str) -> str:
        """Validate display timezone is a known IANA zone name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigError(f"Unknown display timezone: {v}") from e
        return v

    @property
    def display_tz(self) -> ZoneInfo:
        """Display timezone as a tzinfo object.

        Returns:
            ZoneInfo for display_timezone (e.g., ZoneInfo('UTC'))
        """
        return ZoneInfo(self.display_timezone)


def get_settings() -> Settings:
    """Get or create the global Settings instance (cached singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
