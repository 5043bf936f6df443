"""
wikiai_backend.api.__main__

Entrypoint for running the FastAPI application via `python -m wikiai_backend.api`.

Responsibilities:
- Load settings.
- Create the app and announce where it is reachable.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import uvicorn

from wikiai_backend.api.app import create_app
from wikiai_backend.observability.logging import get_logger
from wikiai_backend.settings import get_settings

log = get_logger(__name__)


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    base = f"http://localhost:{settings.api_port}"
    log.info(
        "listening",
        service=settings.service_name,
        version=settings.version,
        port=settings.api_port,
        health_url=f"{base}/health",
        search_url=f"{base}/search",
        openrouter_configured=settings.api_key_configured,
    )

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# For production, this is commonly invoked behind a process manager and fronted by a
# TLS-terminating proxy.
