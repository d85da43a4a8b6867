"""Text-generation provider adapter.

``build_provider_configs`` turns settings into the provider registry, and
``HttpProviderTransport`` performs one HTTP round-trip per attempt.  Each
provider-specific call is a pure function of its config; failover and
bookkeeping live in ``ProviderFallbackClient``.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from folio_ai.domain.enums import ProviderName
from folio_ai.domain.exceptions import ConfigurationError, FormatError, TransportError
from folio_ai.ports.outbound import TextProviderPort
from folio_ai.shared.providers.types import ProviderConfig, RequestOptions

logger = structlog.get_logger(__name__)


def build_provider_configs(
    *,
    openrouter_api_key: str = "",
    gemini_api_key: str = "",
    openrouter_base_url: str = "https://openrouter.ai/api/v1",
    openrouter_model: str = "anthropic/claude-3-haiku",
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta",
    gemini_model: str = "gemini-pro",
    app_url: str = "http://localhost:3000",
    app_title: str = "GitHubFolio",
) -> list[ProviderConfig]:
    """Build the provider registry from settings values.

    Registration order is OpenRouter then Gemini; a provider whose key is
    blank is left out entirely.
    """
    configs: list[ProviderConfig] = []

    openrouter_api_key = openrouter_api_key.strip()
    if openrouter_api_key:
        configs.append(
            ProviderConfig(
                name=ProviderName.OPENROUTER.value,
                base_url=openrouter_base_url.rstrip("/"),
                api_key=openrouter_api_key,
                model=openrouter_model,
                headers={
                    "Authorization": f"Bearer {openrouter_api_key}",
                    "Content-Type": "application/json",
                    "HTTP-Referer": app_url,
                    "X-Title": app_title,
                },
            )
        )

    gemini_api_key = gemini_api_key.strip()
    if gemini_api_key:
        configs.append(
            ProviderConfig(
                name=ProviderName.GEMINI.value,
                base_url=gemini_base_url.rstrip("/"),
                api_key=gemini_api_key,
                model=gemini_model,
                headers={"Content-Type": "application/json"},
            )
        )

    for cfg in configs:
        logger.info("provider_registered", provider=cfg.name, model=cfg.model)

    return configs


class HttpProviderTransport(TextProviderPort):
    """httpx-backed implementation of the per-provider call contract."""

    def __init__(
        self,
        *,
        timeout: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def complete(
        self,
        provider: ProviderConfig,
        prompt: str,
        options: RequestOptions,
    ) -> str:
        if provider.name == ProviderName.OPENROUTER.value:
            return await self._invoke_openrouter(provider, prompt, options)
        elif provider.name == ProviderName.GEMINI.value:
            return await self._invoke_gemini(provider, prompt, options)
        else:
            raise ConfigurationError(provider.name, f"Unknown provider: {provider.name}")

    # ── Provider HTTP calls (pure, no retry logic) ───────────
    async def _invoke_openrouter(
        self, cfg: ProviderConfig, prompt: str, options: RequestOptions
    ) -> str:
        data = await self._post(
            cfg,
            f"{cfg.base_url}/chat/completions",
            {
                "model": cfg.model,
                "messages": [{"role": "user", "content": prompt}],
                "max_tokens": options.max_tokens,
                "temperature": options.temperature,
            },
        )
        try:
            text = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            text = None
        return self._require_text(cfg, text)

    async def _invoke_gemini(
        self, cfg: ProviderConfig, prompt: str, options: RequestOptions
    ) -> str:
        data = await self._post(
            cfg,
            f"{cfg.base_url}/models/{cfg.model}:generateContent",
            {
                "contents": [{"parts": [{"text": prompt}]}],
                "generationConfig": {
                    "maxOutputTokens": options.max_tokens,
                    "temperature": options.temperature,
                },
            },
            params={"key": cfg.api_key},
        )
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            text = None
        return self._require_text(cfg, text)

    async def _post(
        self,
        cfg: ProviderConfig,
        url: str,
        body: dict[str, Any],
        *,
        params: dict[str, str] | None = None,
    ) -> Any:
        try:
            response = await self._client.post(
                url, headers=dict(cfg.headers), json=body, params=params
            )
        except httpx.HTTPError as exc:
            raise TransportError(
                cfg.name, f"API Error: {type(exc).__name__}: {exc}"
            ) from exc

        if not response.is_success:
            raise TransportError.from_status(
                cfg.name, response.status_code, response.reason_phrase
            )

        try:
            return response.json()
        except ValueError as exc:
            raise FormatError(cfg.name) from exc

    @staticmethod
    def _require_text(cfg: ProviderConfig, text: Any) -> str:
        if not isinstance(text, str) or not text:
            raise FormatError(cfg.name)
        return text

    async def close(self) -> None:
        await self._client.aclose()
