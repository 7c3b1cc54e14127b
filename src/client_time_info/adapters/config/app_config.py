"""12-factor configuration adapter using environment variables."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8083, description="Port to bind the server to")

    # Display configuration
    timezone: str | None = Field(
        default=None,
        description="Timezone for displaying server time (IANA timezone name, e.g., 'Europe/Madrid'). "
        "Server local time is used when unset",
    )
    title: str = Field(
        default="Info Cliente - Python Server",
        description="Page title displayed in browser tab",
    )
    escape_html: bool = Field(
        default=True,
        description="HTML-escape client-supplied values (IP, User-Agent, path) in the page",
    )

    # Logging configuration
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str | None) -> str | None:
        """Validate timezone is a known IANA timezone name."""
        if v is None or v == "":
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be a valid IANA timezone name: {v}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is understood by both logging and uvicorn.

        ``WARN`` and ``FATAL`` are accepted as aliases and normalised.
        """
        level = v.upper()
        level = LOG_LEVEL_ALIASES.get(level, level)
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {list(LOG_LEVELS)}")
        return level
