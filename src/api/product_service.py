"""ASGI entrypoint for the product service (`uvicorn src.api.product_service:app`)."""

from __future__ import annotations

from src.api.app import create_app
from src.resources.definitions import PRODUCTS

app = create_app(PRODUCTS)
