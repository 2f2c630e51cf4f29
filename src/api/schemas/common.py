# This file defines shared schema pieces reused by both resource services.
# It exists so envelope and error payloads stay consistent across users and products.
# Shared models reduce duplication and keep contract changes easier to review.
# These classes are also used by tests to validate response shape stability.

from __future__ import annotations

from pydantic import BaseModel


class EnvelopeFields(BaseModel):
    success: bool = True
    message: str | None = None


class MessageResponse(EnvelopeFields):
    pass


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class StringListResponse(EnvelopeFields):
    data: list[str]
    count: int
