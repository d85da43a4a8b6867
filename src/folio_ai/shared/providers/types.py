"""Core types for the provider fallback client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Any

from folio_ai.domain.exceptions import DomainError, ValidationError

DEFAULT_MAX_TOKENS = 1000
DEFAULT_TEMPERATURE = 0.7


@dataclass(frozen=True)
class ProviderConfig:
    """Static configuration for a single provider.

    Attributes:
        name:     Unique identifier (e.g. "openrouter", "gemini").
        base_url: Endpoint root; the request path is appended per provider.
        api_key:  Credential. Providers without one are never registered.
        model:    Model identifier sent with each request.
        headers:  Request headers, frozen at construction.
    """

    name: str
    base_url: str
    api_key: str
    model: str
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def __repr__(self) -> str:
        return f"ProviderConfig(name={self.name!r}, base_url={self.base_url!r}, model={self.model!r})"


_OPTION_ALIASES = {
    "max_tokens": "max_tokens",
    "maxTokens": "max_tokens",
    "temperature": "temperature",
}


@dataclass(frozen=True)
class RequestOptions:
    """Generation parameters recognised by every provider."""

    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE

    def __post_init__(self) -> None:
        if isinstance(self.max_tokens, bool) or not isinstance(self.max_tokens, int):
            raise ValidationError(f"max_tokens must be an integer, got {self.max_tokens!r}")
        if self.max_tokens < 1:
            raise ValidationError(f"max_tokens must be >= 1, got {self.max_tokens}")
        if isinstance(self.temperature, bool) or not isinstance(self.temperature, (int, float)):
            raise ValidationError(f"temperature must be a number, got {self.temperature!r}")
        if not 0.0 <= self.temperature <= 1.0:
            raise ValidationError(
                f"temperature must be between 0.0 and 1.0, got {self.temperature}"
            )

    @classmethod
    def from_mapping(
        cls, raw: Mapping[str, Any] | None = None, *, base: RequestOptions | None = None
    ) -> RequestOptions:
        """Build options from a loose mapping layered over ``base``.

        Unrecognised keys raise ``ValidationError``.
        """
        values = asdict(base) if base is not None else {}
        for key, value in (raw or {}).items():
            target = _OPTION_ALIASES.get(key)
            if target is None:
                raise ValidationError(f"Unrecognised request option: {key!r}")
            values[target] = value
        return cls(**values)


@dataclass(frozen=True)
class Outcome:
    """Uniform success/failure result returned by the fallback client."""

    success: bool
    provider_used: str
    text: str | None = None
    error: str | None = None
    error_code: str | None = None

    @classmethod
    def ok(cls, provider: str, text: str) -> Outcome:
        return cls(success=True, provider_used=provider, text=text)

    @classmethod
    def failed(cls, provider: str, error: DomainError) -> Outcome:
        return cls(
            success=False, provider_used=provider, error=error.message, error_code=error.code
        )


@dataclass(frozen=True)
class ProviderStatus:
    """Read-only snapshot of one registered provider."""

    configured: bool
    failures: int
    is_primary: bool
