"""Configuration objects for the happy hour command line."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration pulled from environment variables."""

    timezone: str = Field(default="UTC", validation_alias="HAPPY_HOUR_TIMEZONE")
    currency_symbol: str = Field(default="$", validation_alias="HAPPY_HOUR_CURRENCY_SYMBOL")
    log_level: str = Field(default="INFO", validation_alias="HAPPY_HOUR_LOG_LEVEL")
    serial_timeout_seconds: int = Field(default=10, validation_alias="HAPPY_HOUR_SERIAL_TIMEOUT_SECONDS")

    model_config = SettingsConfigDict(
        env_file=(".env",),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def normalise_log_level(cls, value: str) -> str:
        """Accept log level names in any case."""
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level '{value}'")
        return level
