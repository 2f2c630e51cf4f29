# This file provides shared helpers for API endpoint tests.
# It exists so every test gets a freshly built app with its own resource manager.
# The helpers build consistent config objects and scoped TestClient contexts.
# Centralized test wiring keeps API tests small and focused on behavior.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi.testclient import TestClient

from src.api.api_config import ApiConfig
from src.api.app import create_app
from src.resources.definitions import ResourceDefinition
from src.resources.manager import ResourceManager


def build_test_config(definition: ResourceDefinition) -> ApiConfig:
    """Create deterministic API config for tests."""

    return ApiConfig(
        service_name=definition.service_name,
        app_version="1.0.0",
        host="0.0.0.0",
        port=definition.default_port,
        environment="test",
        allowed_origins=["*"],
        enable_access_log=True,
        enable_security_headers=True,
    )


@contextmanager
def api_test_client(
    definition: ResourceDefinition,
    *,
    config: ApiConfig | None = None,
    manager: ResourceManager | None = None,
    raise_server_exceptions: bool = True,
) -> Iterator[TestClient]:
    """Yield a TestClient for a new app serving `definition`."""

    app = create_app(
        definition,
        config=config or build_test_config(definition),
        manager=manager or ResourceManager(definition),
    )
    with TestClient(app, raise_server_exceptions=raise_server_exceptions) as client:
        yield client
