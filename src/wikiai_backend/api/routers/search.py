"""
wikiai_backend.api.routers.search

Topic search endpoint.

Responsibilities:
- Validate the incoming topic.
- Delegate article generation to `ArticleService` and wrap the result with metadata.
"""

from __future__ import annotations

import json

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.status import HTTP_400_BAD_REQUEST

from wikiai_backend.api.deps import article_service_dep
from wikiai_backend.services.article_service import ArticleService

router = APIRouter(tags=["search"])


# Scalars are accepted the way a JSON client sends them; falsy ones count as missing.
Topic = str | bool | int | float


class SearchRequest(BaseModel):
    topic: Topic | None = None

    def topic_text(self) -> str:
        if isinstance(self.topic, str):
            return self.topic
        # JSON spelling: true rather than True.
        return json.dumps(self.topic)


class SearchResponse(BaseModel):
    content: str | None
    topic: Topic
    timestamp: str
    model: str
    success: bool = True


@router.post(
    "/search",
    response_model=SearchResponse,
    responses={HTTP_400_BAD_REQUEST: {"description": "Topic missing or body invalid"}},
)
async def search(
    body: SearchRequest | None = None,
    service: ArticleService = Depends(article_service_dep),
):
    # Missing, null, "", 0 and false are rejected; whitespace-only topics are relayed.
    if body is None or not body.topic:
        return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content={"error": "Topic is required"})

    article = await service.generate(topic=body.topic_text())
    return SearchResponse(
        content=article.content,
        topic=body.topic,
        timestamp=article.timestamp,
        model=article.model,
    )


# --- Module Notes -----------------------------------------------------------
# Upstream failures surface as `llm.errors` exceptions and are rendered by
# `api.error_handlers`; nothing is caught here.
