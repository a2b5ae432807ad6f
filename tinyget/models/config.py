"""Application configuration model using pydantic-settings."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tinyget import __version__


class Config(BaseSettings):
    """Runtime configuration loaded from TINYGET_* environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_prefix="TINYGET_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    request_timeout_seconds: float = 30.0
    log_level: str = "WARNING"
    user_agent: str = f"tinyget/{__version__}"

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_request_timeout_seconds(cls, value: float) -> float:
        """Timeout must be positive and at most ten minutes."""
        if value <= 0 or value > 600:
            msg = "request_timeout_seconds must be greater than 0 and at most 600"
            raise ValueError(msg)
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Log level must be a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            msg = f"log_level must be one of {', '.join(sorted(valid_levels))}"
            raise ValueError(msg)
        return upper_value

    @field_validator("user_agent")
    @classmethod
    def validate_user_agent(cls, value: str) -> str:
        """User agent must be non-empty."""
        if not value.strip():
            msg = "user_agent must not be empty"
            raise ValueError(msg)
        return value
