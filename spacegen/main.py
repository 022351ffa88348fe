"""Application entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from spacegen.api.container import get_container
from spacegen.api.dependencies import limiter
from spacegen.api.routes.build_space import router as build_space_router
from spacegen.api.routes.chat_create import router as chat_create_router
from spacegen.api.routes.onboarding import router as onboarding_router
from spacegen.shared.logging import setup_logging

log = structlog.get_logger()


def _apply_logging_config(container):
    """Apply logging from container config (stdout + optional file)."""
    c = container.config
    setup_logging(
        level=c.log_level,
        file_path=c.log_file or "",
        rotation_max_mb=c.log_rotation_max_mb,
        rotation_backups=c.log_rotation_backups,
    )


def _configured_providers(container) -> dict[str, bool]:
    return {name: p.is_configured for name, p in container.providers.items()}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: logging and provider check. Shutdown: close provider clients."""
    container = get_container()
    _apply_logging_config(container)
    providers = _configured_providers(container)
    log.info("startup_begin", primary=container.config.gateway.primary, providers=providers)
    if not any(providers.values()):
        log.warning("no_provider_configured", hint="set OPENROUTER_API_KEY or GEMINI_API_KEY")
    log.info("startup_complete")
    yield
    log.info("shutdown_begin")
    await container.close()
    log.info("shutdown_complete")


# Create app
app = FastAPI(
    title="Space Builder",
    version="0.1.0",
    description="Generates personal workspaces from a short description, streamed over SSE",
    lifespan=lifespan,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# CORS
container = get_container()
app.add_middleware(
    CORSMiddleware,
    allow_origins=container.config.security.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(build_space_router)
app.include_router(chat_create_router)
app.include_router(onboarding_router)


@app.get("/health")
@limiter.limit("100/minute")
async def health(request: Request) -> dict:
    """Health check with provider configuration."""
    return {
        "status": "ok",
        "service": "space-builder",
        "providers": _configured_providers(get_container()),
    }
