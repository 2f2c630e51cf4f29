# This file defines the API error payload and the exception handlers that produce it.
# It exists so every failure, expected or not, reaches clients as `{success: false, error}`.
# The handlers translate domain, validation, routing, and unexpected failures into safe messages.
# Unexpected failures are logged with their traceback and never echoed to the client.

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
INVALID_PAYLOAD_MESSAGE = "Invalid request payload"


class APIError(Exception):
    """Domain error type with an HTTP status and a client-safe message."""

    def __init__(
        self,
        *,
        status_code: int,
        error_code: str,
        message: str,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        super().__init__(message)


def _request_id(request: Request) -> str:
    return str(getattr(request.state, "request_id", "unknown"))


def error_body(message: str) -> dict[str, Any]:
    return {"success": False, "error": message}


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        logger.info(
            "%s %s failed with %s (request_id=%s)",
            request.method,
            request.url.path,
            exc.error_code,
            _request_id(request),
        )
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info(
            "%s %s rejected: %s (request_id=%s)",
            request.method,
            request.url.path,
            exc.errors(),
            _request_id(request),
        )
        return JSONResponse(status_code=400, content=error_body(INVALID_PAYLOAD_MESSAGE))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error on %s %s (request_id=%s)",
            request.method,
            request.url.path,
            _request_id(request),
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content=error_body(INTERNAL_ERROR_MESSAGE))
