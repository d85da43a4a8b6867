"""Text generation service — prompt templates over the fallback client.

Each operation builds a deterministic prompt from its inputs, picks a token
budget, and delegates to ``ProviderFallbackClient.request``.  The service
holds no state of its own.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import structlog

from folio_ai.domain.enums import UNHANDLED_ERROR
from folio_ai.shared.providers.fallback import ProviderFallbackClient
from folio_ai.shared.providers.types import DEFAULT_TEMPERATURE, RequestOptions

logger = structlog.get_logger(__name__)

DEFAULT_TEXT_MAX_TOKENS = 500


# ── Prompt templates ─────────────────────────────────────────
EXPLAIN_CODE_TEMPLATE = (
    "Explain this {language} code in simple terms:\n\n{code}\n\n"
    "Provide a clear, concise explanation of what this code does."
)

FUNCTION_DOCS_TEMPLATE = (
    "Generate comprehensive documentation for this {language} function:\n\n{code}\n\n"
    "Include: purpose, parameters, return value, and usage example."
)

QUESTION_TEMPLATE = "Answer this question clearly and concisely: {question}"

IDEA_TEMPLATE = "Generate a creative and practical idea about: {topic}{context}\n\nMake it innovative and actionable."


@dataclass(frozen=True)
class GenerationResult:
    """Caller-facing result of a convenience operation."""

    success: bool
    provider_used: str
    text: str | None = None
    error: str | None = None


class TextGenerationService:
    """Convenience operations for the portfolio's AI features."""

    def __init__(self, client: ProviderFallbackClient) -> None:
        self._client = client

    @property
    def client(self) -> ProviderFallbackClient:
        return self._client

    async def generate_text(
        self, prompt: str, options: Mapping[str, Any] | RequestOptions | None = None
    ) -> GenerationResult:
        """Generate free text.  Defaults to 500 tokens at temperature 0.7."""
        defaults = RequestOptions(
            max_tokens=DEFAULT_TEXT_MAX_TOKENS, temperature=DEFAULT_TEMPERATURE
        )
        if isinstance(options, RequestOptions):
            request_options = options
        else:
            request_options = RequestOptions.from_mapping(options, base=defaults)

        try:
            outcome = await self._client.request(prompt, request_options)
        except Exception as exc:
            logger.exception("text_generation_unhandled_error")
            return GenerationResult(
                success=False, provider_used=UNHANDLED_ERROR, error=str(exc) or "Unknown error"
            )

        return GenerationResult(
            success=outcome.success,
            provider_used=outcome.provider_used,
            text=outcome.text,
            error=outcome.error,
        )

    async def explain_code(self, code: str, language: str = "javascript") -> GenerationResult:
        prompt = EXPLAIN_CODE_TEMPLATE.format(language=language, code=code)
        return await self.generate_text(prompt, {"max_tokens": 300})

    async def generate_function_docs(
        self, function_code: str, language: str = "javascript"
    ) -> GenerationResult:
        prompt = FUNCTION_DOCS_TEMPLATE.format(language=language, code=function_code)
        return await self.generate_text(prompt, {"max_tokens": 400})

    async def ask_question(self, question: str) -> GenerationResult:
        prompt = QUESTION_TEMPLATE.format(question=question)
        return await self.generate_text(prompt, {"max_tokens": 200})

    async def generate_idea(self, topic: str, context: str = "") -> GenerationResult:
        prompt = IDEA_TEMPLATE.format(
            topic=topic, context=f"\n\nContext: {context}" if context else ""
        )
        return await self.generate_text(prompt, {"max_tokens": 300})
