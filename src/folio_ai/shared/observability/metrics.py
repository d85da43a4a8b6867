"""Prometheus metrics for the text-generation service."""

from __future__ import annotations

from prometheus_client import Counter, Histogram


# ── HTTP metrics ─────────────────────────────────────────────
HTTP_REQUESTS_TOTAL = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

HTTP_REQUEST_DURATION = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

# ── Provider metrics ─────────────────────────────────────────
PROVIDER_REQUESTS_TOTAL = Counter(
    "provider_requests_total",
    "Text-generation attempts per provider",
    ["provider", "outcome"],  # success / failure
)

PROVIDER_LATENCY = Histogram(
    "provider_request_latency_seconds",
    "Latency of a single provider attempt",
    ["provider"],
    buckets=(0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0),
)

PROVIDER_FAILOVERS_TOTAL = Counter(
    "provider_failovers_total",
    "Requests answered by a fallback provider, labelled by the new primary",
    ["provider"],
)

PROVIDER_CHAIN_FAILURES_TOTAL = Counter(
    "provider_chain_failures_total",
    "Requests on which every registered provider failed",
)
