"""
wikiai_backend.llm.openrouter

HTTP client boundary for the OpenRouter chat-completions API.

Responsibilities:
- Build the completion payload and provider headers from settings.
- Perform exactly one POST per call (no retries).
- Translate httpx failures into the `llm.errors` hierarchy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from wikiai_backend.llm.errors import (
    UNKNOWN_API_ERROR,
    ApiKeyMissingError,
    MalformedCompletionError,
    UpstreamRequestError,
    UpstreamStatusError,
    UpstreamUnavailableError,
)
from wikiai_backend.observability.logging import get_logger
from wikiai_backend.settings import Settings

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Completion:
    content: str | None
    model: str


class OpenRouterClient:
    def __init__(self, *, settings: Settings, http: httpx.AsyncClient) -> None:
        self._settings = settings
        self._http = http

    @property
    def url(self) -> str:
        return f"{self._settings.openrouter_base_url.rstrip('/')}/chat/completions"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._settings.openrouter_api_key}",
            "Content-Type": "application/json",
            # Optional attribution headers; OpenRouter uses them for rate limiting/usage tracking.
            "HTTP-Referer": self._settings.openrouter_referer,
            "X-Title": self._settings.openrouter_title,
        }

    def _payload(self, messages: list[dict[str, str]]) -> dict[str, Any]:
        return {
            "model": self._settings.openrouter_model,
            "messages": messages,
            "max_tokens": self._settings.openrouter_max_tokens,
            "temperature": self._settings.openrouter_temperature,
            "top_p": self._settings.openrouter_top_p,
        }

    async def complete(self, messages: list[dict[str, str]]) -> Completion:
        if not self._settings.api_key_configured:
            log.error("openrouter_api_key_missing")
            raise ApiKeyMissingError()

        try:
            r = await self._http.post(
                self.url,
                headers=self._headers(),
                json=self._payload(messages),
                timeout=self._settings.openrouter_timeout_s,
            )
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            body = _response_body(e.response)
            log.error("openrouter_api_error", status_code=e.response.status_code, body=body)
            raise UpstreamStatusError(
                status_code=e.response.status_code,
                details=_error_message(body),
            ) from e
        except httpx.TransportError as e:
            log.error("openrouter_api_error", error=str(e) or type(e).__name__)
            raise UpstreamUnavailableError(str(e)) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log.error("openrouter_api_error", error=str(e) or type(e).__name__)
            raise UpstreamRequestError(str(e)) from e

        try:
            data = r.json()
            # A message without "content" is relayed as null rather than rejected.
            content = data["choices"][0]["message"].get("content")
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            log.error("openrouter_api_error", error="malformed completion", body=r.text[:2000])
            raise MalformedCompletionError("completion body has no choices[0].message") from e

        return Completion(content=content, model=self._settings.openrouter_model)


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_message(body: Any) -> str:
    # OpenRouter error envelope: {"error": {"code": ..., "message": "..."}}
    if isinstance(body, dict):
        err = body.get("error")
        if isinstance(err, dict) and err.get("message"):
            return str(err["message"])
    return UNKNOWN_API_ERROR


# --- Module Notes -----------------------------------------------------------
# The shared AsyncClient is owned by the app lifespan; this class never closes it.
