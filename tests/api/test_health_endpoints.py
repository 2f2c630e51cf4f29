# This file tests the health and service info endpoints of both services.
# It exists to validate operational contracts used by load balancers and clients.
# The tests also confirm request IDs and security headers are attached to responses.

from __future__ import annotations

import logging
from datetime import datetime

import pytest

from src.resources.definitions import PRODUCTS, USERS, ResourceDefinition
from tests.api.support import api_test_client


@pytest.mark.parametrize("definition", [USERS, PRODUCTS])
def test_health_endpoint_returns_expected_fields(definition: ResourceDefinition) -> None:
    with api_test_client(definition) as client:
        response = client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "healthy"
    assert payload["service"] == definition.service_name
    assert payload["version"] == "1.0.0"
    assert datetime.fromisoformat(payload["timestamp"]).tzinfo is not None


def test_user_service_info_lists_endpoints() -> None:
    with api_test_client(USERS) as client:
        response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {
        "service": "user-service",
        "version": "1.0.0",
        "endpoints": {
            "health": "/health",
            "users": "/api/users",
            "user": "/api/users/:id",
        },
    }


def test_product_service_info_lists_categories_endpoint() -> None:
    with api_test_client(PRODUCTS) as client:
        response = client.get("/")

    endpoints = response.json()["endpoints"]
    assert response.json()["service"] == "product-service"
    assert endpoints["products"] == "/api/products"
    assert endpoints["product"] == "/api/products/:id"
    assert endpoints["categories"] == "/api/products/categories"


def test_responses_carry_request_id_and_security_headers() -> None:
    with api_test_client(USERS) as client:
        response = client.get("/health", headers={"x-request-id": "req-123"})

    assert response.headers["x-request-id"] == "req-123"
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "SAMEORIGIN"
    assert float(response.headers["x-response-time-ms"]) >= 0.0


def test_metrics_endpoint_exposes_request_counters() -> None:
    with api_test_client(PRODUCTS) as client:
        client.get("/health")
        response = client.get("/metrics")

    assert response.status_code == 200
    assert "api_http_requests_total" in response.text
    assert 'service="product-service"' in response.text


def test_metrics_label_requests_by_route_template() -> None:
    with api_test_client(USERS) as client:
        client.get("/api/users/1001")
        client.get("/api/users/1002")
        client.get("/api/users/2")
        client.get("/no/such/path-4821")
        response = client.get("/metrics")

    series = [
        line
        for line in response.text.splitlines()
        if line.startswith("api_http_requests_total{") and 'service="user-service"' in line
    ]
    assert any('path="/api/users/{user_id}"' in line for line in series)
    assert any('path="unmatched"' in line for line in series)
    assert not any("1001" in line or "1002" in line or "path-4821" in line for line in series)


def test_startup_logs_service_and_port(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="src.api.app")
    with api_test_client(PRODUCTS) as client:
        client.get("/health")

    assert "product-service v1.0.0 running on port 3001" in caplog.text
    assert "Health check available at http://localhost:3001/health" in caplog.text
