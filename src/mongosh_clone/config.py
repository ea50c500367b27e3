"""Configuration management for mongosh-clone."""

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="MONGOSH_CLONE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Parser Configuration
    escape_mode: Literal["single", "parity"] = Field(
        default="single", description="Backslash escape rule for quotes inside strings"
    )

    # Output Configuration
    output_indent: int = Field(default=2, ge=0, description="JSON indent for printed results")

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")
    log_profile: Literal["default", "rich"] = Field(default="default", description="Log sink profile")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def get_settings(**overrides: object) -> Settings:
    """Get application settings.

    Args:
        **overrides: Field values that take precedence over the environment

    Returns:
        Settings instance
    """
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
