"""
wikiai_backend.services.article_service

Article generation service.

Responsibilities:
- Render the fixed encyclopedia prompt for a topic.
- Make one completion call and stamp the result with metadata.
"""

from __future__ import annotations

from dataclasses import dataclass

from wikiai_backend.llm.openrouter import OpenRouterClient
from wikiai_backend.llm.prompts import build_messages
from wikiai_backend.observability.logging import get_logger
from wikiai_backend.timestamps import utc_timestamp

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Article:
    content: str | None
    topic: str
    timestamp: str
    model: str


class ArticleService:
    def __init__(self, *, client: OpenRouterClient) -> None:
        self._client = client

    async def generate(self, *, topic: str) -> Article:
        # Errors from the client propagate untouched; the API layer owns their translation.
        completion = await self._client.complete(build_messages(topic))
        log.info(
            "article_generated",
            model=completion.model,
            topic_length=len(topic),
            content_length=len(completion.content or ""),
        )
        return Article(
            content=completion.content,
            topic=topic,
            timestamp=utc_timestamp(),
            model=completion.model,
        )


# --- Module Notes -----------------------------------------------------------
# No retries or caching here: one topic in, one upstream call out.
