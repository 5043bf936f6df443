"""
wikiai_backend.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings and the shared outbound HTTP client.
- Encapsulate app.state access patterns.
- Assemble the article service per request.
"""

from __future__ import annotations

import httpx
from fastapi import Depends, Request

from wikiai_backend.llm.openrouter import OpenRouterClient
from wikiai_backend.services.article_service import ArticleService
from wikiai_backend.settings import Settings


def settings_dep(request: Request) -> Settings:
    # Settings are attached in `wikiai_backend.api.app.create_app`.
    return request.app.state.settings  # type: ignore[attr-defined]


def http_client_dep(request: Request) -> httpx.AsyncClient:
    # Opened by the app lifespan (or injected by the caller of create_app).
    return request.app.state.http  # type: ignore[attr-defined]


def openrouter_client_dep(
    settings: Settings = Depends(settings_dep),
    http: httpx.AsyncClient = Depends(http_client_dep),
) -> OpenRouterClient:
    return OpenRouterClient(settings=settings, http=http)


def article_service_dep(
    client: OpenRouterClient = Depends(openrouter_client_dep),
) -> ArticleService:
    return ArticleService(client=client)
