"""Domain-specific exception hierarchy.

All exceptions inherit from ``DomainError`` so callers can catch the entire
family in one clause while still discriminating on subclass.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for all domain-layer errors."""

    def __init__(self, message: str, *, code: str = "DOMAIN_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(message)


# ── Validation ───────────────────────────────────────────────
class ValidationError(DomainError):
    """Input failed domain validation rules."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="VALIDATION_ERROR")


# ── Providers ────────────────────────────────────────────────
class ProviderError(DomainError):
    """Base for failures attributable to a single text-generation provider."""

    def __init__(self, provider: str, message: str, *, code: str = "PROVIDER_ERROR") -> None:
        self.provider = provider
        super().__init__(message, code=code)


class ConfigurationError(ProviderError):
    def __init__(self, provider: str, message: str = "No providers configured") -> None:
        super().__init__(provider, message, code="CONFIGURATION_ERROR")


class TransportError(ProviderError):
    """The call did not complete, or completed with a non-success status."""

    def __init__(
        self,
        provider: str,
        message: str,
        *,
        status_code: int | None = None,
        reason: str = "",
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(provider, message, code="TRANSPORT_ERROR")

    @classmethod
    def from_status(cls, provider: str, status_code: int, reason: str) -> TransportError:
        return cls(
            provider,
            f"API Error: {status_code} {reason}".rstrip(),
            status_code=status_code,
            reason=reason,
        )


class FormatError(ProviderError):
    """The call succeeded but the expected text field was missing."""

    def __init__(self, provider: str, message: str = "Invalid response format from API") -> None:
        super().__init__(provider, message, code="FORMAT_ERROR")


class AllProvidersFailedError(DomainError):
    """Every registered provider failed during one pass.

    The message stays generic; per-provider detail is kept in ``errors``.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        super().__init__(
            "All providers failed. Check the provider credentials and network connection.",
            code="ALL_PROVIDERS_FAILED",
        )


class ProviderNotFoundError(DomainError):
    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Provider {provider!r} is not registered", code="PROVIDER_NOT_FOUND")
