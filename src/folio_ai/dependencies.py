"""Composition root — wires adapters to ports.

The fallback client and the text service are built once per application in
``create_app`` and stored on ``app.state``.  FastAPI's ``Depends()`` system
uses the getters below to hand them to route handlers, so each app (and
each test) owns an isolated client.
"""

from __future__ import annotations

from fastapi import Request

from folio_ai.adapters.outbound.llm import HttpProviderTransport, build_provider_configs
from folio_ai.application.services import TextGenerationService
from folio_ai.config import Settings
from folio_ai.ports.outbound import TextProviderPort
from folio_ai.shared.providers.fallback import ProviderFallbackClient


# ── Builders ─────────────────────────────────────────────────
def build_fallback_client(
    settings: Settings,
    *,
    transport: TextProviderPort | None = None,
) -> ProviderFallbackClient:
    """Read provider credentials from ``settings`` and build the client."""
    providers = build_provider_configs(
        openrouter_api_key=settings.openrouter_api_key,
        gemini_api_key=settings.gemini_api_key,
        openrouter_base_url=settings.openrouter_base_url,
        openrouter_model=settings.openrouter_model,
        gemini_base_url=settings.gemini_base_url,
        gemini_model=settings.gemini_model,
        app_url=settings.app_url,
        app_title=settings.app_title,
    )
    transport = transport or HttpProviderTransport(timeout=settings.provider_timeout_seconds)
    return ProviderFallbackClient(providers, transport)


# ── Request-scoped getters ───────────────────────────────────
def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[no-any-return]


def get_fallback_client(request: Request) -> ProviderFallbackClient:
    return request.app.state.fallback_client  # type: ignore[no-any-return]


def get_text_service(request: Request) -> TextGenerationService:
    return request.app.state.text_service  # type: ignore[no-any-return]
