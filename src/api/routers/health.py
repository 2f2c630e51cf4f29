# This file defines the liveness and service info endpoints.
# It exists so load balancers and operators can verify a service quickly.
# Neither endpoint touches the resource store; both describe the service that answers.

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.api_config import ApiConfig
from src.api.dependencies import get_config, get_definition
from src.api.schemas.health_schemas import HealthResponse, ServiceInfoResponse
from src.resources.definitions import ResourceDefinition

router = APIRouter(tags=["health"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
DefinitionDep = Annotated[ResourceDefinition, Depends(get_definition)]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@router.get("/health", response_model=HealthResponse)
def health(config: ConfigDep) -> dict[str, object]:
    return {
        "status": "healthy",
        "service": config.service_name,
        "version": config.app_version,
        "timestamp": _utc_now(),
    }


@router.get("/", response_model=ServiceInfoResponse)
def service_info(config: ConfigDep, definition: DefinitionDep) -> dict[str, object]:
    return {
        "service": config.service_name,
        "version": config.app_version,
        "endpoints": definition.endpoint_map(),
    }
