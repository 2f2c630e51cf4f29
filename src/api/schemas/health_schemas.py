# This file defines response schemas for the health and service info endpoints.
# It exists to keep operational status contracts explicit for load balancers and clients.
# The info model advertises the endpoint map of the service that answers.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    timestamp: datetime


class ServiceInfoResponse(BaseModel):
    service: str
    version: str
    endpoints: dict[str, str]
