# This file tests the catch-all error handler for unexpected failures.
# It exists to confirm internal details never reach the client and the fault is logged.

from __future__ import annotations

import logging

import pytest

from src.resources.definitions import PRODUCTS
from src.resources.manager import ResourceManager
from tests.api.support import api_test_client


class ExplodingManager(ResourceManager):
    def list_records(self, filters: object = None) -> list[dict[str, object]]:
        raise RuntimeError("store exploded: secret detail")


def test_unhandled_error_returns_generic_500(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR, logger="src.api.error_handlers")
    with api_test_client(
        PRODUCTS,
        manager=ExplodingManager(PRODUCTS),
        raise_server_exceptions=False,
    ) as client:
        response = client.get("/api/products")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Internal server error"}
    assert "secret detail" not in response.text
    assert "Unhandled error on GET /api/products" in caplog.text
