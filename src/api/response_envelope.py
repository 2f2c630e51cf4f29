# This file builds response envelopes for resource endpoints in a consistent format.
# It exists so every success carries `success: true` and optional data, count, and message keys.
# Manager outcomes are unwrapped here, and failing outcomes become APIError exceptions.
# This keeps router functions focused on request parsing instead of envelope assembly.

from __future__ import annotations

from typing import Any

from src.api.error_handlers import APIError
from src.resources.definitions import ResourceDefinition
from src.resources.manager import NotFound, Outcome, ValidationFailure
from src.resources.store import Record


def build_list_envelope(*, data: list[Any]) -> dict[str, Any]:
    """Build standard list response envelope."""

    return {"success": True, "data": data, "count": len(data)}


def build_object_envelope(
    *,
    data: Record | None = None,
    message: str | None = None,
) -> dict[str, Any]:
    """Build standard single-record response envelope."""

    payload: dict[str, Any] = {"success": True}
    if data is not None:
        payload["data"] = data
    if message is not None:
        payload["message"] = message
    return payload


def unwrap_outcome(outcome: Outcome, *, definition: ResourceDefinition) -> Record | None:
    """Return the record of a successful outcome or raise the matching APIError."""

    if isinstance(outcome, NotFound):
        raise APIError(
            status_code=404,
            error_code="NOT_FOUND",
            message=definition.not_found_message,
        )
    if isinstance(outcome, ValidationFailure):
        raise APIError(
            status_code=400,
            error_code="VALIDATION_ERROR",
            message=outcome.message,
        )
    return outcome.record
