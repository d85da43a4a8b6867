"""Tests for request options, outcomes, errors, and settings."""

from __future__ import annotations

import pytest

from folio_ai.config import Environment, get_settings
from folio_ai.dependencies import build_fallback_client
from folio_ai.domain.exceptions import (
    AllProvidersFailedError,
    ConfigurationError,
    DomainError,
    ProviderError,
    TransportError,
    ValidationError,
)
from folio_ai.shared.providers.types import Outcome, RequestOptions

from tests.fakes import ScriptedTransport


class TestRequestOptions:
    def test_defaults(self) -> None:
        options = RequestOptions()
        assert options.max_tokens == 1000
        assert options.temperature == 0.7

    def test_zero_temperature_is_kept(self) -> None:
        assert RequestOptions(temperature=0.0).temperature == 0.0

    @pytest.mark.parametrize("temperature", [-0.1, 1.5, "hot", True])
    def test_invalid_temperature(self, temperature: object) -> None:
        with pytest.raises(ValidationError):
            RequestOptions(temperature=temperature)  # type: ignore[arg-type]

    @pytest.mark.parametrize("max_tokens", [0, -5, 1.5, None])
    def test_invalid_max_tokens(self, max_tokens: object) -> None:
        with pytest.raises(ValidationError):
            RequestOptions(max_tokens=max_tokens)  # type: ignore[arg-type]

    def test_from_mapping_accepts_camel_case(self) -> None:
        options = RequestOptions.from_mapping({"maxTokens": 12})
        assert options == RequestOptions(max_tokens=12, temperature=0.7)

    def test_from_mapping_layers_over_base(self) -> None:
        base = RequestOptions(max_tokens=500, temperature=0.3)
        assert RequestOptions.from_mapping({"temperature": 0.9}, base=base) == RequestOptions(
            max_tokens=500, temperature=0.9
        )
        assert RequestOptions.from_mapping(None, base=base) == base

    def test_from_mapping_rejects_unknown_keys(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            RequestOptions.from_mapping({"stream": True})
        assert "stream" in exc_info.value.message


class TestOutcome:
    def test_ok(self) -> None:
        outcome = Outcome.ok("gemini", "text")
        assert outcome.success is True
        assert outcome.error is None

    def test_failed_carries_error_code(self) -> None:
        outcome = Outcome.failed("none", ConfigurationError("none"))
        assert outcome.success is False
        assert outcome.text is None
        assert outcome.error == "No providers configured"
        assert outcome.error_code == "CONFIGURATION_ERROR"


class TestErrors:
    def test_transport_error_message(self) -> None:
        err = TransportError.from_status("openrouter", 401, "Unauthorized")
        assert isinstance(err, ProviderError)
        assert err.message == "API Error: 401 Unauthorized"
        assert err.code == "TRANSPORT_ERROR"

    def test_all_failed_carries_errors(self) -> None:
        err = AllProvidersFailedError({"openrouter": "503", "gemini": "format"})
        assert isinstance(err, DomainError)
        assert err.errors == {"openrouter": "503", "gemini": "format"}
        assert "503" not in err.message
        assert err.code == "ALL_PROVIDERS_FAILED"


class TestSettings:
    def test_defaults_without_credentials(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in (
            "OPENROUTER_API_KEY",
            "NEXT_PUBLIC_OPENROUTER_API_KEY",
            "GEMINI_API_KEY",
            "NEXT_PUBLIC_GEMINI_API_KEY",
        ):
            monkeypatch.delenv(var, raising=False)
        settings = get_settings(_env_file=None)
        assert settings.openrouter_api_key == ""
        assert settings.gemini_api_key == ""
        assert settings.app_env == Environment.DEVELOPMENT

    def test_public_env_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)
        monkeypatch.delenv("APP_URL", raising=False)
        monkeypatch.setenv("NEXT_PUBLIC_OPENROUTER_API_KEY", "public-key")
        monkeypatch.setenv("NEXT_PUBLIC_APP_URL", "https://me.example.test")
        settings = get_settings(_env_file=None)
        assert settings.openrouter_api_key == "public-key"
        assert settings.app_url == "https://me.example.test"

    def test_empty_key_falls_through_to_public_alias(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("OPENROUTER_API_KEY", "")
        monkeypatch.setenv("NEXT_PUBLIC_OPENROUTER_API_KEY", "or-key")
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("NEXT_PUBLIC_GEMINI_API_KEY", raising=False)

        settings = get_settings(_env_file=None)
        client = build_fallback_client(settings, transport=ScriptedTransport())

        assert settings.openrouter_api_key == "or-key"
        assert [p.name for p in client.providers] == ["openrouter"]

    def test_primary_key_wins_over_public_alias(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENROUTER_API_KEY", "server-key")
        monkeypatch.setenv("NEXT_PUBLIC_OPENROUTER_API_KEY", "public-key")
        assert get_settings(_env_file=None).openrouter_api_key == "server-key"

    def test_keys_are_stripped_and_log_level_upper(self) -> None:
        settings = get_settings(_env_file=None, gemini_api_key="  gm  ", log_level="debug")
        assert settings.gemini_api_key == "gm"
        assert settings.log_level == "DEBUG"

    def test_build_client_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)
        monkeypatch.delenv("NEXT_PUBLIC_OPENROUTER_API_KEY", raising=False)
        settings = get_settings(_env_file=None, openrouter_api_key="", gemini_api_key="gm")
        client = build_fallback_client(settings, transport=ScriptedTransport())
        assert [p.name for p in client.providers] == ["gemini"]
        assert client.current_primary() == "gemini"

    def test_no_credentials_gives_empty_registry(self) -> None:
        settings = get_settings(_env_file=None, openrouter_api_key="", gemini_api_key="")
        client = build_fallback_client(settings, transport=ScriptedTransport())
        assert client.providers == ()
        assert client.current_primary() == "none"
