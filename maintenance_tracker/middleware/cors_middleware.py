"""
Cross-origin middleware.

Adds the permissive CORS headers to every response, whatever its origin or
outcome, and answers every OPTIONS request with an empty 200 before it
reaches routing.

Starlette's ``CORSMiddleware`` only decorates requests carrying an ``Origin``
header and only answers well-formed preflights, so it is not used here.
"""

from typing import Callable, Dict, Sequence

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """Middleware applying a fixed set of cross-origin headers."""

    def __init__(
        self,
        app: ASGIApp,
        allow_origin: str = "*",
        allow_methods: Sequence[str] = ("POST", "GET", "OPTIONS", "PUT", "DELETE"),
        allow_headers: Sequence[str] = ("Content-Type",),
    ):
        super().__init__(app)
        self.cors_headers: Dict[str, str] = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": ", ".join(allow_methods),
            "Access-Control-Allow-Headers": ", ".join(allow_headers),
        }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)

        response.headers.update(self.cors_headers)
        # Empty responses (preflight, 204) still declare JSON.
        response.headers.setdefault("Content-Type", "application/json")
        return response
