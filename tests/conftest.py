"""Shared test fixtures."""

from __future__ import annotations

import pytest

from folio_ai.config import Settings, get_settings
from folio_ai.shared.providers.fallback import ProviderFallbackClient
from folio_ai.shared.providers.types import ProviderConfig

from tests.fakes import ScriptedTransport, make_provider


@pytest.fixture
def provider_configs() -> list[ProviderConfig]:
    return [make_provider("alpha"), make_provider("beta")]


@pytest.fixture
def transport() -> ScriptedTransport:
    return ScriptedTransport()


@pytest.fixture
def client(
    provider_configs: list[ProviderConfig], transport: ScriptedTransport
) -> ProviderFallbackClient:
    return ProviderFallbackClient(provider_configs, transport)


@pytest.fixture
def settings() -> Settings:
    return get_settings(
        _env_file=None,
        openrouter_api_key="or-test-key",
        gemini_api_key="gm-test-key",
        app_url="https://folio.example.test",
    )
