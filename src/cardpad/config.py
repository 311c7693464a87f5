"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STATE_FILE = Path.home() / ".cache" / "cardpad" / "session.json"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="CARDPAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # AnkiConnect
    ANKICONNECT_URL: str = "http://127.0.0.1:8765"
    ANKICONNECT_API_VERSION: int = 5
    # None waits for the service indefinitely
    REQUEST_TIMEOUT: float | None = None

    # Last used card type / deck, shared between CLI invocations
    STATE_FILE: Path = DEFAULT_STATE_FILE

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: Literal["console", "json"] = "console"

    @field_validator("ANKICONNECT_URL", mode="after")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Strip trailing slashes from the service URL."""
        return value.rstrip("/")

    @field_validator("ANKICONNECT_API_VERSION", mode="after")
    @classmethod
    def validate_api_version(cls, value: int) -> int:
        """Require a positive API version."""
        if value < 1:
            msg = "ANKICONNECT_API_VERSION must be positive"
            raise ValueError(msg)
        return value

    @field_validator("LOG_LEVEL", mode="after")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the log level and reject unknown names."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown LOG_LEVEL '{value}'"
            raise ValueError(msg)
        return level


def configure_logging(level: str = "WARNING", log_format: str = "console") -> None:
    """Configure structured logging with structlog.

    Logs go to stderr so command output on stdout stays parseable.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.WARNING),
        force=True,
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
