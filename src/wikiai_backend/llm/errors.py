"""
wikiai_backend.llm.errors

Failure modes of a completion call. The API layer maps each to an HTTP response
in `api.error_handlers`.
"""

from __future__ import annotations

UNKNOWN_API_ERROR = "Unknown API error"


class CompletionError(Exception):
    """Base class for every failure of the outbound completion call."""


class ApiKeyMissingError(CompletionError):
    def __init__(self) -> None:
        super().__init__("OpenRouter API key is not configured")


class UpstreamStatusError(CompletionError):
    """The provider answered with a non-2xx status."""

    def __init__(self, *, status_code: int, details: str = UNKNOWN_API_ERROR) -> None:
        super().__init__(f"upstream returned {status_code}: {details}")
        self.status_code = status_code
        self.details = details


class UpstreamUnavailableError(CompletionError):
    """No response was received (connect error, timeout, broken connection)."""


class UpstreamRequestError(CompletionError):
    """The call failed for another reason (undecodable body, redirect loop, bad base URL)."""


class MalformedCompletionError(CompletionError):
    """A 2xx response whose body does not carry a completion."""
