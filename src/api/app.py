# This file builds the FastAPI application for one resource service.
# It exists so startup behavior, middleware, and error handling are configured in one place.
# The app adds request IDs, timing and security headers, access logging, and Prometheus metrics.
# Each app owns its resource manager, so separate apps never share records.

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import RequestResponseEndpoint
from starlette.routing import Match
from starlette.types import Scope

from src.api.api_config import ApiConfig, load_api_config
from src.api.error_handlers import register_error_handlers
from src.api.routers.health import router as health_router
from src.api.routers.products import router as products_router
from src.api.routers.users import router as users_router
from src.common.logging import configure_logging
from src.resources.definitions import ResourceDefinition
from src.resources.manager import ResourceManager

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("src.api.access")

API_HTTP_REQUESTS_TOTAL = Counter(
    "api_http_requests_total",
    "Total number of HTTP requests processed by the API.",
    ["service", "method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "api_http_request_duration_seconds",
    "API request duration in seconds.",
    ["service", "method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "api_http_inflight_requests",
    "Number of API requests currently being processed.",
    ["service", "method", "path"],
)

SECURITY_HEADERS: dict[str, str] = {
    "x-content-type-options": "nosniff",
    "x-frame-options": "SAMEORIGIN",
    "referrer-policy": "no-referrer",
    "x-dns-prefetch-control": "off",
}

RESOURCE_ROUTERS: dict[str, APIRouter] = {
    "users": users_router,
    "products": products_router,
}
UNMATCHED_PATH_LABEL = "unmatched"


def route_path_label(app: FastAPI, scope: Scope) -> str:
    """Return the route template matching `scope`, so ids never become metric labels."""

    partial: str | None = None
    for route in app.router.routes:
        match, _ = route.matches(scope)
        if match == Match.FULL:
            return getattr(route, "path", UNMATCHED_PATH_LABEL)
        if match == Match.PARTIAL and partial is None:
            partial = getattr(route, "path", UNMATCHED_PATH_LABEL)
    return partial or UNMATCHED_PATH_LABEL


def create_app(
    definition: ResourceDefinition,
    *,
    config: ApiConfig | None = None,
    manager: ResourceManager | None = None,
) -> FastAPI:
    """Create configured FastAPI application instance serving `definition`."""

    configure_logging()
    config = config or load_api_config(definition)
    manager = manager or ResourceManager(definition)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger.info("%s v%s running on port %s", config.service_name, config.app_version, config.port)
        logger.info("Health check available at %s", config.health_url())
        yield

    app = FastAPI(
        lifespan=lifespan,
        title=config.service_name,
        description=f"In-memory {definition.name} service with a uniform JSON response envelope.",
        version=config.app_version,
        openapi_tags=[
            {"name": "health", "description": "Service liveness and endpoint metadata."},
            {
                "name": definition.name,
                "description": f"Create, read, update, and delete {definition.name}.",
            },
        ],
    )
    app.state.config = config
    app.state.resource_manager = manager

    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        method_label = request.method
        path_label = route_path_label(app, request.scope)
        started = time.perf_counter()
        status_code = 500
        API_HTTP_INFLIGHT_REQUESTS.labels(
            service=config.service_name, method=method_label, path=path_label
        ).inc()
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"
            if config.enable_security_headers:
                for name, value in SECURITY_HEADERS.items():
                    response.headers.setdefault(name, value)

            return response
        finally:
            duration_s = time.perf_counter() - started
            if config.enable_access_log:
                client_host = request.client.host if request.client else "-"
                access_logger.info(
                    '%s "%s %s" %s %.2fms',
                    client_host,
                    method_label,
                    request.url.path,
                    status_code,
                    duration_s * 1000.0,
                )
            API_HTTP_REQUESTS_TOTAL.labels(
                service=config.service_name,
                method=method_label,
                path=path_label,
                status_code=str(status_code),
            ).inc()
            API_HTTP_REQUEST_DURATION_SECONDS.labels(
                service=config.service_name,
                method=method_label,
                path=path_label,
            ).observe(duration_s)
            API_HTTP_INFLIGHT_REQUESTS.labels(
                service=config.service_name, method=method_label, path=path_label
            ).dec()

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(RESOURCE_ROUTERS[definition.name])

    return app
