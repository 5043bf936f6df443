"""
wikiai_backend.api.error_handlers

Global exception handlers.

Responsibilities:
- Translate `llm.errors` failures into the relay's JSON error shapes.
- Turn body validation failures into 400s and unknown routes into a JSON 404.
- Catch-all 500 that never leaks internal details and keeps the response headers.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_405_METHOD_NOT_ALLOWED,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_503_SERVICE_UNAVAILABLE,
)

from wikiai_backend.llm.errors import (
    ApiKeyMissingError,
    CompletionError,
    UpstreamStatusError,
    UpstreamUnavailableError,
)
from wikiai_backend.observability.logging import get_logger
from wikiai_backend.timestamps import utc_timestamp

log = get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    _register_completion_error_handlers(app)
    _register_validation_error_handler(app)
    _register_not_found_handler(app)
    _register_generic_error_handler(app)


def _register_completion_error_handlers(app: FastAPI) -> None:
    # Starlette resolves handlers along the exception MRO, so the subclasses win
    # over the CompletionError fallback.

    @app.exception_handler(ApiKeyMissingError)
    async def api_key_missing_handler(request: Request, exc: ApiKeyMissingError) -> JSONResponse:
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Backend configuration error: API key missing."},
        )

    @app.exception_handler(UpstreamStatusError)
    async def upstream_status_handler(request: Request, exc: UpstreamStatusError) -> JSONResponse:
        # The provider's status is relayed as-is (429 stays 429, 401 stays 401).
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": "AI service error",
                "details": exc.details,
                "timestamp": utc_timestamp(),
            },
        )

    @app.exception_handler(UpstreamUnavailableError)
    async def upstream_unavailable_handler(
        request: Request, exc: UpstreamUnavailableError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "error": "AI service unavailable",
                "details": "Unable to connect to AI service",
                "timestamp": utc_timestamp(),
            },
        )

    @app.exception_handler(CompletionError)
    async def completion_error_handler(request: Request, exc: CompletionError) -> JSONResponse:
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "details": "Something went wrong on our end",
                "timestamp": utc_timestamp(),
            },
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        log.warning("request_validation_failed", errors=len(exc.errors()))
        return JSONResponse(
            status_code=HTTP_400_BAD_REQUEST,
            content={
                "error": "Invalid request body",
                "details": [
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                        "type": e["type"],
                    }
                    for e in exc.errors()
                ],
                "timestamp": utc_timestamp(),
            },
        )


def _register_not_found_handler(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        # A known path with the wrong method is reported like any unknown endpoint.
        if exc.status_code in (HTTP_404_NOT_FOUND, HTTP_405_METHOD_NOT_ALLOWED):
            return JSONResponse(
                status_code=HTTP_404_NOT_FOUND,
                content={
                    "error": "Endpoint not found",
                    "message": "The requested endpoint does not exist",
                    "timestamp": utc_timestamp(),
                },
            )
        return await http_exception_handler(request, exc)


def _internal_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "message": "Something went wrong",
            "timestamp": utc_timestamp(),
        },
    )


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """
    Renders unexpected exceptions as the generic 500 inside the middleware stack, so the
    response still passes through the CORS, request-context and policy-header layers.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            log.error("unhandled_error", exc_info=exc)
            return _internal_error_response()


def _register_generic_error_handler(app: FastAPI) -> None:
    # Last resort for failures raised by the outer middlewares themselves.
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        log.error("unhandled_error", exc_info=exc)
        return _internal_error_response()


# --- Module Notes -----------------------------------------------------------
# The search route never catches CompletionError itself; keeping the translation here
# makes the relay's error contract readable in one place.
