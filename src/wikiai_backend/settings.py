"""
wikiai_backend.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the API and the OpenRouter client.
- Accept the conventional `OPENROUTER_API_KEY` / `PORT` variables alongside prefixed ones.
- Hide the upstream API key from repr/logging.
- Offer a cached settings instance for the process entrypoint.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wikiai_backend import __version__


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WIKIAI_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "WikiAI Backend"
    version: str = __version__
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    api_host: str = "0.0.0.0"
    api_port: int = Field(default=5000, validation_alias=AliasChoices("PORT", "WIKIAI_API_PORT"))

    # Browser origins allowed to call the API with credentials.
    cors_origins: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "https://wikiai-f51a1.web.app",
            "http://localhost:5500",
        ]
    )

    # Upstream (OpenRouter chat completions)
    openrouter_api_key: str | None = Field(
        default=None,
        repr=False,
        validation_alias=AliasChoices("OPENROUTER_API_KEY", "WIKIAI_OPENROUTER_API_KEY"),
    )
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_model: str = "meta-llama/llama-3.1-70b-instruct"
    openrouter_max_tokens: int = 2000
    # Low temperature keeps articles factual.
    openrouter_temperature: float = 0.3
    openrouter_top_p: float = 0.9
    openrouter_referer: str = "http://localhost:5000"
    openrouter_title: str = "WikiAI Search"
    openrouter_timeout_s: float = 60.0

    @property
    def api_key_configured(self) -> bool:
        return bool(self.openrouter_api_key)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars (and .env) more than once per process.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Request handlers read settings from `app.state.settings` (see `api.deps`), so an app
# built with explicit Settings never falls back to the process environment.
