"""
Application settings loaded from environment variables.
It centralizes process-wide concerns shared by both services, such as the environment name and log level.
Service-specific values (port, host, CORS) live in the API config instead.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Final

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

DEFAULT_ENV_VALUES: Final[dict[str, str]] = {
    "PROJECT_NAME": "catalog-services",
    "ENV": "local",
    "LOG_LEVEL": "INFO",
}
LOG_LEVELS: Final[frozenset[str]] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseModel):
    """Typed runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    PROJECT_NAME: str
    ENV: str
    LOG_LEVEL: str

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level_name = value.strip().upper()
        if level_name not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return level_name


def load_settings(*, load_env: bool = True) -> Settings:
    """Load and validate environment settings from `.env` and process environment."""

    if load_env:
        load_dotenv()

    values = {key: os.getenv(key) or default for key, default in DEFAULT_ENV_VALUES.items()}
    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached accessor for application settings."""

    return load_settings()
