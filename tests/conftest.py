"""
tests.conftest

Shared helpers for driving the app in-process against a fake OpenRouter.

Responsibilities:
- Build test settings that never read the process environment or a local .env.
- Wire an `httpx.MockTransport` upstream into the app and an ASGI client in front of it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from wikiai_backend.api.app import create_app
from wikiai_backend.settings import Settings

Handler = Callable[[httpx.Request], httpx.Response]


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {"env": "test", "openrouter_api_key": "sk-test"}
    values.update(overrides)
    # Aliased fields go in under their primary alias so they outrank the process environment.
    values["OPENROUTER_API_KEY"] = values.pop("openrouter_api_key")
    return Settings(_env_file=None, **values)


def completion_body(content: str = "## Overview\nText.") -> dict[str, Any]:
    return {
        "id": "gen-1",
        "model": "meta-llama/llama-3.1-70b-instruct",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
    }


class Upstream:
    """Records outbound requests and answers with a configurable handler."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Handler = lambda request: httpx.Response(200, json=completion_body())

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    return make_settings


@pytest.fixture
def upstream() -> Upstream:
    return Upstream()


@pytest.fixture
def make_client(upstream: Upstream):
    def _make(settings: Settings | None = None):
        http = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
        app = create_app(settings=settings or make_settings(), http=http)
        transport = httpx.ASGITransport(app=app)
        return app, httpx.AsyncClient(transport=transport, base_url="http://test")

    return _make
