# This file defines the product collection endpoints, including list filters and categories.
# It exists so clients can browse and maintain the product catalog over HTTP.
# The categories route is registered before the id route so it is never read as an id.
# Handlers are coroutines that never await while touching the store.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Query

from src.api.dependencies import get_resource_manager
from src.api.error_handlers import APIError
from src.api.query_params import normalize_text_filter, parse_number_filter
from src.api.response_envelope import build_list_envelope, build_object_envelope, unwrap_outcome
from src.api.schemas.common import ErrorResponse, MessageResponse, StringListResponse
from src.api.schemas.product_schemas import (
    ProductListResponseV1,
    ProductPayload,
    ProductResponseV1,
)
from src.resources.manager import ResourceManager, parse_record_id

router = APIRouter(prefix="/api/products", tags=["products"])
ManagerDep = Annotated[ResourceManager, Depends(get_resource_manager)]
PayloadBody = Annotated[ProductPayload | None, Body()]
NOT_FOUND_RESPONSES: dict[int | str, dict[str, object]] = {404: {"model": ErrorResponse}}


def _payload_values(payload: ProductPayload | None) -> dict[str, object]:
    if payload is None:
        return {}
    return payload.model_dump(exclude_none=True)


@router.get(
    "",
    response_model=ProductListResponseV1,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
async def list_products(
    manager: ManagerDep,
    category: str | None = Query(default=None),
    min_price: str | None = Query(default=None, alias="minPrice"),
    max_price: str | None = Query(default=None, alias="maxPrice"),
) -> dict[str, object]:
    try:
        filters = {
            "category": normalize_text_filter(category),
            "minPrice": parse_number_filter(min_price, param="minPrice"),
            "maxPrice": parse_number_filter(max_price, param="maxPrice"),
        }
    except ValueError as exc:
        raise APIError(
            status_code=400,
            error_code="INVALID_QUERY_PARAM",
            message=str(exc),
        ) from exc

    return build_list_envelope(data=manager.list_records(filters))


@router.get("/categories", response_model=StringListResponse, response_model_exclude_none=True)
async def list_categories(manager: ManagerDep) -> dict[str, object]:
    return build_list_envelope(data=manager.distinct_values("category"))


@router.get(
    "/{product_id}",
    response_model=ProductResponseV1,
    response_model_exclude_none=True,
    responses=NOT_FOUND_RESPONSES,
)
async def get_product(product_id: str, manager: ManagerDep) -> dict[str, object]:
    outcome = manager.get_record(parse_record_id(product_id))
    return build_object_envelope(data=unwrap_outcome(outcome, definition=manager.definition))


@router.post(
    "",
    status_code=201,
    response_model=ProductResponseV1,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
async def create_product(manager: ManagerDep, payload: PayloadBody = None) -> dict[str, object]:
    outcome = manager.create_record(_payload_values(payload))
    return build_object_envelope(
        data=unwrap_outcome(outcome, definition=manager.definition),
        message=manager.definition.message_for("created"),
    )


@router.put(
    "/{product_id}",
    response_model=ProductResponseV1,
    response_model_exclude_none=True,
    responses=NOT_FOUND_RESPONSES,
)
async def update_product(
    product_id: str,
    manager: ManagerDep,
    payload: PayloadBody = None,
) -> dict[str, object]:
    outcome = manager.update_record(parse_record_id(product_id), _payload_values(payload))
    return build_object_envelope(
        data=unwrap_outcome(outcome, definition=manager.definition),
        message=manager.definition.message_for("updated"),
    )


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND_RESPONSES,
)
async def delete_product(product_id: str, manager: ManagerDep) -> dict[str, object]:
    unwrap_outcome(manager.delete_record(parse_record_id(product_id)), definition=manager.definition)
    return build_object_envelope(message=manager.definition.message_for("deleted"))
