# This file defines product request and response schemas.
# Request fields are all optional because presence rules live in the resource manager.
# Numeric strings such as "49.99" are accepted for price and stock, as JSON clients often send them.

from __future__ import annotations

from pydantic import BaseModel

from src.api.schemas.common import EnvelopeFields


class ProductRecordV1(BaseModel):
    id: int
    name: str
    price: float
    category: str
    stock: int


class ProductPayload(BaseModel):
    name: str | None = None
    price: float | None = None
    category: str | None = None
    stock: int | None = None


class ProductResponseV1(EnvelopeFields):
    data: ProductRecordV1


class ProductListResponseV1(EnvelopeFields):
    data: list[ProductRecordV1]
    count: int
