"""
wikiai_backend.api.routers.health

Health and service index endpoints.

Responsibilities:
- Provide a liveness probe (`/health`).
- Describe the service and its endpoints at `/`.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from wikiai_backend.api.deps import settings_dep
from wikiai_backend.settings import Settings
from wikiai_backend.timestamps import utc_timestamp

router = APIRouter()


@router.get("/health")
async def health(settings: Settings = Depends(settings_dep)) -> dict[str, str]:
    # Liveness only: the upstream provider is not probed.
    return {
        "status": "healthy",
        "timestamp": utc_timestamp(),
        "service": settings.service_name,
        "version": settings.version,
    }


@router.get("/")
async def index(settings: Settings = Depends(settings_dep)) -> dict[str, Any]:
    return {
        "message": f"🧠 {settings.service_name} API",
        "version": settings.version,
        "endpoints": {
            "search": "POST /search - Search for topics using AI",
            "health": "GET /health - Service health check",
        },
        "status": "✅ Online",
        "timestamp": utc_timestamp(),
    }
