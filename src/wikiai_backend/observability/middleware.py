"""
wikiai_backend.observability.middleware

HTTP middleware for request-scoped logging context and response policy headers.

Responsibilities:
- Generate/propagate request IDs.
- Bind request metadata into structlog contextvars.
- Stamp browser isolation/referrer policy headers on every response.
"""

from __future__ import annotations

import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

# Popups must keep their opener so the frontend's Firebase sign-in flow works.
POLICY_HEADERS: dict[str, str] = {
    "Cross-Origin-Opener-Policy": "same-origin-allow-popups",
    "Referrer-Policy": "no-referrer-when-downgrade",
}


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    - Ensures every request has a request id
    - Binds request-scoped contextvars for structured logs
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )
        try:
            response: Response = await call_next(request)
        finally:
            # Avoid leaking context across requests under async concurrency.
            structlog.contextvars.clear_contextvars()

        response.headers["x-request-id"] = request_id
        return response


class PolicyHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        response: Response = await call_next(request)
        for name, value in POLICY_HEADERS.items():
            response.headers[name] = value
        return response


# --- Module Notes -----------------------------------------------------------
# CORS is handled by Starlette's CORSMiddleware (registered in `api.app`); preflight
# responses are answered there and never reach these middlewares.
