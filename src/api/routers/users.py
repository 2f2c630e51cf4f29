# This file defines the user collection endpoints.
# It exists so clients can list, read, create, update, and delete users over HTTP.
# Handlers are coroutines that never await while touching the store, so each request's
# store access completes before the next request runs.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Body, Depends

from src.api.dependencies import get_resource_manager
from src.api.response_envelope import build_list_envelope, build_object_envelope, unwrap_outcome
from src.api.schemas.common import ErrorResponse, MessageResponse
from src.api.schemas.user_schemas import UserListResponseV1, UserPayload, UserResponseV1
from src.resources.manager import ResourceManager, parse_record_id

router = APIRouter(prefix="/api/users", tags=["users"])
ManagerDep = Annotated[ResourceManager, Depends(get_resource_manager)]
PayloadBody = Annotated[UserPayload | None, Body()]
NOT_FOUND_RESPONSES: dict[int | str, dict[str, object]] = {404: {"model": ErrorResponse}}


def _payload_values(payload: UserPayload | None) -> dict[str, object]:
    if payload is None:
        return {}
    return payload.model_dump(exclude_none=True)


@router.get("", response_model=UserListResponseV1, response_model_exclude_none=True)
async def list_users(manager: ManagerDep) -> dict[str, object]:
    return build_list_envelope(data=manager.list_records())


@router.get(
    "/{user_id}",
    response_model=UserResponseV1,
    response_model_exclude_none=True,
    responses=NOT_FOUND_RESPONSES,
)
async def get_user(user_id: str, manager: ManagerDep) -> dict[str, object]:
    outcome = manager.get_record(parse_record_id(user_id))
    return build_object_envelope(data=unwrap_outcome(outcome, definition=manager.definition))


@router.post(
    "",
    status_code=201,
    response_model=UserResponseV1,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
async def create_user(manager: ManagerDep, payload: PayloadBody = None) -> dict[str, object]:
    outcome = manager.create_record(_payload_values(payload))
    return build_object_envelope(
        data=unwrap_outcome(outcome, definition=manager.definition),
        message=manager.definition.message_for("created"),
    )


@router.put(
    "/{user_id}",
    response_model=UserResponseV1,
    response_model_exclude_none=True,
    responses=NOT_FOUND_RESPONSES,
)
async def update_user(
    user_id: str,
    manager: ManagerDep,
    payload: PayloadBody = None,
) -> dict[str, object]:
    outcome = manager.update_record(parse_record_id(user_id), _payload_values(payload))
    return build_object_envelope(
        data=unwrap_outcome(outcome, definition=manager.definition),
        message=manager.definition.message_for("updated"),
    )


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND_RESPONSES,
)
async def delete_user(user_id: str, manager: ManagerDep) -> dict[str, object]:
    unwrap_outcome(manager.delete_record(parse_record_id(user_id)), definition=manager.definition)
    return build_object_envelope(message=manager.definition.message_for("deleted"))
