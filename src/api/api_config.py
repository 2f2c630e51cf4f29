# This file defines runtime settings for one service's API layer.
# It exists so port, host, CORS, and middleware toggles can be configured without code edits.
# The config loader reads environment variables and falls back to the resource's defaults.
# The service name and default port come from the resource definition the service serves.

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.resources.definitions import ResourceDefinition


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    service_name: str
    app_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int
    environment: str = "local"
    allowed_origins: list[str] = Field(default_factory=lambda: ["*"])
    enable_access_log: bool = True
    enable_security_headers: bool = True

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 1 <= value <= 65535:
            raise ValueError("port must be between 1 and 65535.")
        return value

    def health_url(self) -> str:
        return f"http://localhost:{self.port}/health"


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


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_api_config(definition: ResourceDefinition, *, load_env: bool = True) -> ApiConfig:
    """Load API configuration for `definition` from `.env` and process environment."""

    if load_env:
        load_dotenv()

    config_values: dict[str, object] = {
        "service_name": definition.service_name,
        "app_version": os.getenv("APP_VERSION", "1.0.0"),
        "host": os.getenv("API_HOST", "0.0.0.0"),
        "port": _env_int("PORT", definition.default_port),
        "environment": os.getenv("ENV", "local"),
        "allowed_origins": _env_list("API_ALLOWED_ORIGINS", ["*"]),
        "enable_access_log": _env_bool("API_ENABLE_ACCESS_LOG", True),
        "enable_security_headers": _env_bool("API_ENABLE_SECURITY_HEADERS", True),
    }
    return ApiConfig.model_validate(config_values)
