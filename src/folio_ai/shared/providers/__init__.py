"""Provider fallback framework.

Holds the fixed provider registry, sequential failover with sticky promotion,
and per-provider failure bookkeeping for text-generation calls.
"""

from folio_ai.shared.providers.types import (
    Outcome,
    ProviderConfig,
    ProviderStatus,
    RequestOptions,
)
from folio_ai.shared.providers.fallback import ProviderFallbackClient

__all__ = [
    "Outcome",
    "ProviderConfig",
    "ProviderFallbackClient",
    "ProviderStatus",
    "RequestOptions",
]
