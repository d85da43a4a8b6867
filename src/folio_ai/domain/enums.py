"""Domain enumerations for the text-generation service."""

from __future__ import annotations

import enum


class ProviderName(str, enum.Enum):
    """Text-generation backends the service knows how to talk to."""

    OPENROUTER = "openrouter"
    GEMINI = "gemini"


# ── Sentinel labels for ``Outcome.provider_used`` ──
NO_PROVIDER = "none"
ALL_FAILED = "all_failed"
UNHANDLED_ERROR = "error"
