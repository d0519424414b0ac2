"""
Application settings loaded from environment variables.
It centralizes process-level concerns like the bind address, port, and log level.
Every value has a local-development default, so an empty environment still starts the server.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Final

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

DEFAULT_PORT: Final[int] = 3332

SETTINGS_DEFAULTS: Final[dict[str, str]] = {
    "PROJECT_NAME": "monitor-service",
    "ENV": "local",
    "LOG_LEVEL": "INFO",
    "HOST": "0.0.0.0",
    "PORT": str(DEFAULT_PORT),
}


class Settings(BaseModel):
    """Typed runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    PROJECT_NAME: str
    ENV: str
    LOG_LEVEL: str
    HOST: str
    PORT: int

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("PORT must be between 1 and 65535.")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()


def load_settings(*, load_env: bool = True) -> Settings:
    """Load and validate environment settings from `.env` and process environment."""

    if load_env:
        load_dotenv()

    values = {
        key: os.getenv(key) or default for key, default in SETTINGS_DEFAULTS.items()
    }

    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached accessor for application settings."""

    return load_settings()
