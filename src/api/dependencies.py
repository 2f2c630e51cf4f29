# This file provides dependency accessors for FastAPI routes.
# It exists so routes reach the config and resource manager owned by the app they are mounted on.
# Each app instance carries its own manager, which keeps tests isolated from each other.
# Routers stay thin because they never construct state themselves.

from __future__ import annotations

from fastapi import Request

from src.api.api_config import ApiConfig
from src.resources.definitions import ResourceDefinition
from src.resources.manager import ResourceManager


def get_config(request: Request) -> ApiConfig:
    return request.app.state.config


def get_resource_manager(request: Request) -> ResourceManager:
    return request.app.state.resource_manager


def get_definition(request: Request) -> ResourceDefinition:
    return request.app.state.resource_manager.definition
