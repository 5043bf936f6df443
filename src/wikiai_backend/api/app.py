"""
wikiai_backend.api.app

FastAPI app factory for the WikiAI Backend service.

Responsibilities:
- Build the FastAPI application and register routers, middleware and error handlers.
- Own the shared outbound HTTP client (opened on startup, closed on shutdown).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wikiai_backend.api.error_handlers import UnhandledErrorMiddleware, register_error_handlers
from wikiai_backend.api.routers.health import router as health_router
from wikiai_backend.api.routers.search import router as search_router
from wikiai_backend.observability.logging import configure_logging, get_logger
from wikiai_backend.observability.middleware import (
    PolicyHeadersMiddleware,
    RequestContextMiddleware,
)
from wikiai_backend.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings, http: httpx.AsyncClient | None = None) -> FastAPI:
    """
    `http` lets callers (tests, embedding apps) supply the outbound client; when omitted the
    lifespan opens one and closes it on shutdown.
    """

    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        fmt=settings.log_format,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info(
            "startup",
            env=settings.env,
            version=settings.version,
            model=settings.openrouter_model,
            api_key_configured=settings.api_key_configured,
        )
        owned = getattr(app.state, "http", None) is None
        if owned:
            app.state.http = httpx.AsyncClient()
        try:
            yield
        finally:
            if owned:
                await app.state.http.aclose()
                app.state.http = None
            log.info("shutdown")

    app = FastAPI(
        title=settings.service_name,
        version=settings.version,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.http = http

    # Last added runs first: CORS answers preflights before anything else sees them, and
    # unexpected errors become a 500 innermost so every layer still decorates it.
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(PolicyHeadersMiddleware)
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(search_router)

    return app


# --- Module Notes -----------------------------------------------------------
# This file is intentionally small: app composition stays here; relay logic stays
# in the llm and services layers.
