"""ASGI entrypoint for the user service (`uvicorn src.api.user_service:app`)."""

from __future__ import annotations

from src.api.app import create_app
from src.resources.definitions import USERS

app = create_app(USERS)
