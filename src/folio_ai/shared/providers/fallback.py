"""Provider fallback client — the entry-point for text-generation calls.

Tries the current primary provider, then every other registered provider in
registration order.  The first fallback provider to answer becomes the new
primary for all later requests.  Every failure is caught at the per-provider
boundary and folded into an ``Outcome``; nothing is raised to the caller.

State (primary index, last-used name, consecutive failure counts) lives for
the lifetime of the instance only.  Concurrent requests share that state
without locking, so the last writer wins.
"""

from __future__ import annotations

import time
from collections.abc import Sequence

import structlog

from folio_ai.domain.enums import ALL_FAILED, NO_PROVIDER
from folio_ai.domain.exceptions import AllProvidersFailedError, ConfigurationError
from folio_ai.ports.outbound import TextProviderPort
from folio_ai.shared.observability.metrics import (
    PROVIDER_CHAIN_FAILURES_TOTAL,
    PROVIDER_FAILOVERS_TOTAL,
    PROVIDER_LATENCY,
    PROVIDER_REQUESTS_TOTAL,
)
from folio_ai.shared.providers.types import (
    Outcome,
    ProviderConfig,
    ProviderStatus,
    RequestOptions,
)

logger = structlog.get_logger(__name__)


class ProviderFallbackClient:
    """Sequential failover across an ordered, fixed registry of providers.

    Usage::

        client = ProviderFallbackClient(providers, transport)
        outcome = await client.request("Summarise this repo", RequestOptions(max_tokens=200))
    """

    def __init__(
        self,
        providers: Sequence[ProviderConfig],
        transport: TextProviderPort,
    ) -> None:
        names = [p.name for p in providers]
        if len(set(names)) != len(names):
            raise ValueError(f"Provider names must be unique: {names}")

        self._providers: tuple[ProviderConfig, ...] = tuple(providers)
        self._transport = transport
        self._primary_index = 0
        self._last_used = ""
        self._failures: dict[str, int] = {name: 0 for name in names}

        if not self._providers:
            logger.warning("no_providers_configured")

    @property
    def providers(self) -> tuple[ProviderConfig, ...]:
        return self._providers

    # ── Main entry-point ─────────────────────────────────────
    async def request(
        self, prompt: str, options: RequestOptions | None = None
    ) -> Outcome:
        """Generate text from ``prompt`` using the first provider that answers."""
        options = options or RequestOptions()

        if not self._providers:
            error = ConfigurationError(NO_PROVIDER)
            logger.warning("request_without_providers", code=error.code)
            return Outcome.failed(NO_PROVIDER, error)

        errors: dict[str, str] = {}
        primary_index = self._primary_index
        primary = self._providers[primary_index]

        text = await self._attempt(primary, prompt, options, errors)
        if text is not None:
            return Outcome.ok(primary.name, text)

        for index, provider in enumerate(self._providers):
            if index == primary_index:
                continue

            text = await self._attempt(provider, prompt, options, errors)
            if text is not None:
                self._primary_index = index
                PROVIDER_FAILOVERS_TOTAL.labels(provider=provider.name).inc()
                logger.info(
                    "provider_failover_success",
                    provider=provider.name,
                    previous_primary=primary.name,
                    failed_providers=list(errors),
                )
                return Outcome.ok(provider.name, text)

        failure = AllProvidersFailedError(errors)
        PROVIDER_CHAIN_FAILURES_TOTAL.inc()
        logger.error("all_providers_failed", code=failure.code, errors=failure.errors)
        return Outcome.failed(ALL_FAILED, failure)

    # ── Provider-level attempt ───────────────────────────────
    async def _attempt(
        self,
        provider: ProviderConfig,
        prompt: str,
        options: RequestOptions,
        errors: dict[str, str],
    ) -> str | None:
        name = provider.name
        log = logger.bind(provider=name, model=provider.model)

        start = time.monotonic()
        try:
            text = await self._transport.complete(provider, prompt, options)
        except Exception as exc:
            latency_ms = (time.monotonic() - start) * 1000
            self._failures[name] = self._failures.get(name, 0) + 1
            errors[name] = str(exc) or type(exc).__name__
            PROVIDER_REQUESTS_TOTAL.labels(provider=name, outcome="failure").inc()
            log.warning(
                "provider_request_failed",
                error=errors[name],
                error_type=type(exc).__name__,
                consecutive_failures=self._failures[name],
                latency_ms=round(latency_ms, 1),
            )
            return None

        latency_ms = (time.monotonic() - start) * 1000
        self._last_used = name
        self._failures[name] = 0
        PROVIDER_REQUESTS_TOTAL.labels(provider=name, outcome="success").inc()
        PROVIDER_LATENCY.labels(provider=name).observe(latency_ms / 1000)
        log.info("provider_request_success", latency_ms=round(latency_ms, 1))
        return text

    # ── Observation & admin ──────────────────────────────────
    def current_primary(self) -> str:
        if not self._providers:
            return NO_PROVIDER
        return self._providers[self._primary_index].name

    def last_used(self) -> str:
        return self._last_used

    def status(self) -> dict[str, ProviderStatus]:
        primary = self.current_primary()
        return {
            p.name: ProviderStatus(
                configured=True,
                failures=self._failures.get(p.name, 0),
                is_primary=p.name == primary,
            )
            for p in self._providers
        }

    def switch_to(self, provider_name: str) -> bool:
        """Make ``provider_name`` the primary.  Returns False if it is not registered."""
        for index, provider in enumerate(self._providers):
            if provider.name == provider_name:
                previous = self.current_primary()
                self._primary_index = index
                logger.info("provider_switched", provider=provider_name, previous_primary=previous)
                return True
        logger.info("provider_switch_rejected", provider=provider_name)
        return False

    async def close(self) -> None:
        await self._transport.close()
