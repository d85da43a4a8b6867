"""Data Transfer Objects — Pydantic models for API boundaries.

Request bodies forbid unknown fields so a misspelt option is a 422 rather
than a silently ignored value.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _StrictRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")


# ═══════════════════════════════════════════════════════════════
#  Common
# ═══════════════════════════════════════════════════════════════
class ErrorResponse(BaseModel):
    code: str
    message: str


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    environment: str
    providers: list[str] = Field(default_factory=list)


# ═══════════════════════════════════════════════════════════════
#  Providers
# ═══════════════════════════════════════════════════════════════
class ProviderStatusResponse(BaseModel):
    configured: bool
    failures: int
    is_primary: bool


class ProvidersOverviewResponse(BaseModel):
    primary: str
    last_used: str
    providers: dict[str, ProviderStatusResponse]


class SwitchProviderRequest(_StrictRequest):
    provider: str = Field(..., min_length=1, max_length=50)


class SwitchProviderResponse(BaseModel):
    switched: bool
    primary: str


class ProviderProbeRequest(_StrictRequest):
    prompt: str = Field(..., max_length=20000)
    max_tokens: int = Field(200, ge=1, le=8192)
    temperature: float = Field(0.7, ge=0.0, le=1.0)


class OutcomeResponse(BaseModel):
    success: bool
    provider_used: str
    text: str | None = None
    error: str | None = None
    error_code: str | None = None


# ═══════════════════════════════════════════════════════════════
#  AI helpers
# ═══════════════════════════════════════════════════════════════
class GenerateTextRequest(_StrictRequest):
    prompt: str = Field(..., max_length=20000)
    max_tokens: int | None = Field(None, ge=1, le=8192)
    temperature: float | None = Field(None, ge=0.0, le=1.0)


class ExplainCodeRequest(_StrictRequest):
    code: str = Field(..., max_length=20000)
    language: str = Field("javascript", min_length=1, max_length=50)


class FunctionDocsRequest(_StrictRequest):
    function_code: str = Field(..., max_length=20000)
    language: str = Field("javascript", min_length=1, max_length=50)


class QuestionRequest(_StrictRequest):
    question: str = Field(..., max_length=5000)


class IdeaRequest(_StrictRequest):
    topic: str = Field(..., max_length=1000)
    context: str = Field("", max_length=5000)


class GenerationResponse(BaseModel):
    success: bool
    provider_used: str
    text: str | None = None
    error: str | None = None
