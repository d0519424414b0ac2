# This file defines runtime settings for the API layer in one place.
# It exists so the route prefix, CORS origins, seeding, and request logging can change without code edits.
# The config loader reads environment variables and applies safe defaults for local development.

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "Monitor Store API"
    monitors_path: str = "/api/monitors"
    environment: str = "local"
    app_version: str = "0.1.0"
    allowed_origins: list[str] = Field(default_factory=list)
    enable_request_logging: bool = True
    seed_enabled: bool = True

    @field_validator("monitors_path")
    @classmethod
    def validate_monitors_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("monitors_path must start with '/'.")
        cleaned = value.rstrip("/")
        if not cleaned:
            raise ValueError("monitors_path must not be the root path.")
        return cleaned


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be boolean-like, got {raw!r}")


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", "Monitor Store API"),
        "monitors_path": os.getenv("API_MONITORS_PATH", "/api/monitors"),
        "environment": os.getenv("ENV", "local"),
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
        "allowed_origins": _env_list("API_ALLOWED_ORIGINS", []),
        "enable_request_logging": _env_bool("API_ENABLE_REQUEST_LOGGING", True),
        "seed_enabled": _env_bool("MONITOR_SEED_ENABLED", True),
    }

    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
