"""
Error Handling

Renders every failure as ``{"error": message}`` with the status code of its
error kind. Domain errors and framework errors go through exception
handlers; anything unexpected is caught by ``ErrorHandlingMiddleware``.
"""

import logging
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from maintenance_tracker.core.exceptions import (
    INVALID_BODY_MESSAGE,
    INVALID_ID_MESSAGE,
    MaintenanceRequestError,
    MethodNotAllowedError,
    ParseError,
)

logger = logging.getLogger(__name__)


def error_response(error: MaintenanceRequestError, headers: dict = None) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content={"error": error.message},
        headers=headers,
    )


async def maintenance_request_error_handler(request: Request, exc: MaintenanceRequestError) -> JSONResponse:
    logger.debug("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Path IDs that are not integers and undecodable bodies are parse errors."""
    errors = exc.errors()
    if any(error.get("loc", ())[:1] == ("path",) for error in errors):
        error = ParseError(INVALID_ID_MESSAGE)
    else:
        error = ParseError(INVALID_BODY_MESSAGE)
    logger.debug("%s %s rejected: %s", request.method, request.url.path, errors)
    return error_response(error)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        return error_response(MethodNotAllowedError("Method not allowed"), headers=exc.headers)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=exc.headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MaintenanceRequestError, maintenance_request_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware turning unhandled exceptions into a 500 error envelope."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error during %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=500,
                content={"error": "Internal server error"},
            )
