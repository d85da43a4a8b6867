"""Health, Providers, AI — REST routers."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from folio_ai import __version__
from folio_ai.application.dtos import (
    ErrorResponse,
    ExplainCodeRequest,
    FunctionDocsRequest,
    GenerateTextRequest,
    GenerationResponse,
    HealthResponse,
    IdeaRequest,
    OutcomeResponse,
    ProviderProbeRequest,
    ProvidersOverviewResponse,
    ProviderStatusResponse,
    QuestionRequest,
    SwitchProviderRequest,
    SwitchProviderResponse,
)
from folio_ai.application.services import GenerationResult, TextGenerationService
from folio_ai.config import Settings
from folio_ai.dependencies import get_app_settings, get_fallback_client, get_text_service
from folio_ai.domain.exceptions import ProviderNotFoundError
from folio_ai.shared.providers.fallback import ProviderFallbackClient
from folio_ai.shared.providers.types import RequestOptions


def _to_response(result: GenerationResult) -> GenerationResponse:
    return GenerationResponse(
        success=result.success,
        provider_used=result.provider_used,
        text=result.text,
        error=result.error,
    )


# ═══════════════════════════════════════════════════════════════
#  Health
# ═══════════════════════════════════════════════════════════════
health_router = APIRouter(tags=["Health"])


@health_router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: Settings = Depends(get_app_settings),
    client: ProviderFallbackClient = Depends(get_fallback_client),
) -> HealthResponse:
    return HealthResponse(
        status="ok" if client.providers else "degraded",
        version=__version__,
        environment=settings.app_env.value,
        providers=[p.name for p in client.providers],
    )


@health_router.get("/metrics")
async def prometheus_metrics() -> Response:
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )


# ═══════════════════════════════════════════════════════════════
#  Providers (fallback dashboard)
# ═══════════════════════════════════════════════════════════════
providers_router = APIRouter(prefix="/providers", tags=["Providers"])


@providers_router.get("/status", response_model=ProvidersOverviewResponse)
async def provider_status(
    client: ProviderFallbackClient = Depends(get_fallback_client),
) -> ProvidersOverviewResponse:
    """Primary, last-used provider and per-provider failure counts."""
    return ProvidersOverviewResponse(
        primary=client.current_primary(),
        last_used=client.last_used(),
        providers={
            name: ProviderStatusResponse(
                configured=s.configured,
                failures=s.failures,
                is_primary=s.is_primary,
            )
            for name, s in client.status().items()
        },
    )


@providers_router.post(
    "/switch",
    response_model=SwitchProviderResponse,
    responses={404: {"model": ErrorResponse}},
)
async def switch_provider(
    body: SwitchProviderRequest,
    client: ProviderFallbackClient = Depends(get_fallback_client),
) -> SwitchProviderResponse:
    if not client.switch_to(body.provider):
        raise ProviderNotFoundError(body.provider)
    return SwitchProviderResponse(switched=True, primary=client.current_primary())


@providers_router.post("/test", response_model=OutcomeResponse)
async def probe_provider_chain(
    body: ProviderProbeRequest,
    client: ProviderFallbackClient = Depends(get_fallback_client),
) -> OutcomeResponse:
    """Send a probe prompt through the fallback chain and return the raw outcome."""
    outcome = await client.request(
        body.prompt,
        RequestOptions(max_tokens=body.max_tokens, temperature=body.temperature),
    )
    return OutcomeResponse(
        success=outcome.success,
        provider_used=outcome.provider_used,
        text=outcome.text,
        error=outcome.error,
        error_code=outcome.error_code,
    )


# ═══════════════════════════════════════════════════════════════
#  AI helpers
# ═══════════════════════════════════════════════════════════════
ai_router = APIRouter(prefix="/ai", tags=["AI"])


@ai_router.post("/generate", response_model=GenerationResponse)
async def generate_text(
    body: GenerateTextRequest,
    service: TextGenerationService = Depends(get_text_service),
) -> GenerationResponse:
    options = body.model_dump(exclude={"prompt"}, exclude_none=True)
    return _to_response(await service.generate_text(body.prompt, options))


@ai_router.post("/explain", response_model=GenerationResponse)
async def explain_code(
    body: ExplainCodeRequest,
    service: TextGenerationService = Depends(get_text_service),
) -> GenerationResponse:
    return _to_response(await service.explain_code(body.code, body.language))


@ai_router.post("/docs", response_model=GenerationResponse)
async def generate_function_docs(
    body: FunctionDocsRequest,
    service: TextGenerationService = Depends(get_text_service),
) -> GenerationResponse:
    return _to_response(
        await service.generate_function_docs(body.function_code, body.language)
    )


@ai_router.post("/ask", response_model=GenerationResponse)
async def ask_question(
    body: QuestionRequest,
    service: TextGenerationService = Depends(get_text_service),
) -> GenerationResponse:
    return _to_response(await service.ask_question(body.question))


@ai_router.post("/idea", response_model=GenerationResponse)
async def generate_idea(
    body: IdeaRequest,
    service: TextGenerationService = Depends(get_text_service),
) -> GenerationResponse:
    return _to_response(await service.generate_idea(body.topic, body.context))
