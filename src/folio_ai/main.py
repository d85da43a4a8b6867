"""FastAPI application entry-point.

Assembles routers, middleware, exception handlers, and lifecycle hooks.
Serve with ``uvicorn folio_ai.main:create_app --factory``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from folio_ai import __version__
from folio_ai.adapters.inbound.rest.routers import ai_router, health_router, providers_router
from folio_ai.application.services import TextGenerationService
from folio_ai.config import Settings, get_settings
from folio_ai.dependencies import build_fallback_client
from folio_ai.shared.errors import register_exception_handlers
from folio_ai.shared.middleware import RequestContextMiddleware
from folio_ai.shared.observability import configure_logging
from folio_ai.shared.providers.fallback import ProviderFallbackClient

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifecycle — startup & shutdown hooks."""
    settings: Settings = app.state.settings
    client: ProviderFallbackClient = app.state.fallback_client
    logger.info(
        "application_starting",
        env=settings.app_env.value,
        providers=[p.name for p in client.providers],
        primary=client.current_primary(),
    )

    yield

    await client.close()
    logger.info("application_shutdown")


def create_app(
    settings: Settings | None = None,
    *,
    client: ProviderFallbackClient | None = None,
) -> FastAPI:
    """Application factory — creates a fully configured FastAPI instance."""
    settings = settings or get_settings()
    configure_logging(
        log_level=settings.log_level,
        json_logs=settings.is_production,
    )

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Text-generation backend for the developer portfolio. "
            "Fails over between OpenRouter and Gemini and exposes provider status."
        ),
        version=__version__,
        debug=settings.app_debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )

    # Store shared state for lifecycle access and dependency getters
    app.state.settings = settings
    app.state.fallback_client = client or build_fallback_client(settings)
    app.state.text_service = TextGenerationService(app.state.fallback_client)

    # ── Middleware (last added = outermost) ───
    cors_origins = settings.cors_origins
    allow_all_origins = "*" in cors_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[] if allow_all_origins else cors_origins,
        allow_origin_regex=".*" if allow_all_origins else None,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    # ── Exception handlers ───────────────────────────────────
    register_exception_handlers(app)

    # ── REST routers (versioned) ─────────────────────────────
    api_v1 = "/api/v1"
    app.include_router(health_router, prefix=api_v1)
    app.include_router(providers_router, prefix=api_v1)
    app.include_router(ai_router, prefix=api_v1)

    @app.get("/")
    async def root() -> dict[str, str]:
        return {
            "message": "Folio AI is running",
            "docs": "/docs",
            "health": "/api/v1/health",
        }

    return app
