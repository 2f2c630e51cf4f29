# This module declares the per-resource rules that configure the generic resource manager.
# It exists so users and products share one manager and differ only in field rules, filters, and seeds.
# Each definition also carries the service identity and default port used when the service starts.
# Seed records mirror the fixed data every service process starts with.

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from src.resources.store import Record


@dataclass(frozen=True)
class FieldRule:
    """Create/update behavior for one record field."""

    name: str
    required: bool = False
    default: Any = None
    coerce: Callable[[Any], Any] | None = None
    merge_falsy: bool = False

    def convert(self, value: Any) -> Any:
        if self.coerce is None:
            return value
        return self.coerce(value)


@dataclass(frozen=True)
class ListFilter:
    """Named list filter; `matches` receives the record and the requested value."""

    param: str
    matches: Callable[[Record, Any], bool]


@dataclass(frozen=True)
class ResourceDefinition:
    name: str
    label: str
    singular: str
    service_name: str
    default_port: int
    fields: tuple[FieldRule, ...]
    required_message: str
    seed: tuple[Record, ...] = ()
    filters: tuple[ListFilter, ...] = ()
    extra_endpoints: Mapping[str, str] = field(default_factory=dict)

    @property
    def collection_path(self) -> str:
        return f"/api/{self.name}"

    @property
    def not_found_message(self) -> str:
        return f"{self.label} not found"

    def message_for(self, action: str) -> str:
        return f"{self.label} {action} successfully"

    def endpoint_map(self) -> dict[str, str]:
        return {
            "health": "/health",
            self.name: self.collection_path,
            self.singular: f"{self.collection_path}/:id",
            **self.extra_endpoints,
        }


def _category_matches(record: Record, value: Any) -> bool:
    return str(record["category"]).lower() == str(value).lower()


def _min_price_matches(record: Record, value: Any) -> bool:
    return float(record["price"]) >= float(value)


def _max_price_matches(record: Record, value: Any) -> bool:
    return float(record["price"]) <= float(value)


USERS = ResourceDefinition(
    name="users",
    label="User",
    singular="user",
    service_name="user-service",
    default_port=3000,
    fields=(
        FieldRule("name", required=True),
        FieldRule("email", required=True),
        FieldRule("role", default="user"),
    ),
    required_message="Name and email are required",
    seed=(
        {"id": 1, "name": "John Doe", "email": "john@example.com", "role": "admin"},
        {"id": 2, "name": "Jane Smith", "email": "jane@example.com", "role": "user"},
        {"id": 3, "name": "Bob Johnson", "email": "bob@example.com", "role": "user"},
    ),
)

PRODUCTS = ResourceDefinition(
    name="products",
    label="Product",
    singular="product",
    service_name="product-service",
    default_port=3001,
    fields=(
        FieldRule("name", required=True),
        FieldRule("price", required=True, coerce=float),
        FieldRule("category", required=True),
        # stock=0 is a real update, unlike the other fields.
        FieldRule("stock", default=0, coerce=int, merge_falsy=True),
    ),
    required_message="Name, price, and category are required",
    seed=(
        {"id": 1, "name": "Laptop", "price": 999.99, "category": "Electronics", "stock": 50},
        {"id": 2, "name": "Mouse", "price": 29.99, "category": "Electronics", "stock": 200},
        {"id": 3, "name": "Keyboard", "price": 79.99, "category": "Electronics", "stock": 150},
        {"id": 4, "name": "Monitor", "price": 299.99, "category": "Electronics", "stock": 75},
    ),
    filters=(
        ListFilter("category", _category_matches),
        ListFilter("minPrice", _min_price_matches),
        ListFilter("maxPrice", _max_price_matches),
    ),
    extra_endpoints={"categories": "/api/products/categories"},
)

RESOURCE_DEFINITIONS: dict[str, ResourceDefinition] = {
    USERS.name: USERS,
    PRODUCTS.name: PRODUCTS,
}
