# studyhub/main.py

"""StudyHub Auth - FastAPI application factory."""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from studyhub.adapters.configuration.config import settings
from studyhub.adapters.inbound.api.v1.router import api_router
from studyhub.adapters.outbound.persistence.database import (
    create_tables,
    dispose_engine,
    get_session_local,
)
from studyhub.adapters.outbound.persistence.models.base_model import register_all_events
from studyhub.adapters.outbound.persistence.repositories.token_repository import AsyncTokenRepository
from studyhub.adapters.outbound.security.jwt_config import JWTConfig
from studyhub.adapters.outbound.security.token_manager import JWTTokenManager
from studyhub.shared.middleware import (
    AsyncRequestLoggingMiddleware,
    ErrorHandlerMiddleware,
    SlowAPIMiddleware,
    limiter,
)
from studyhub.shared.middleware.error_handler_middleware import request_validation_exception_handler
from studyhub.shared.middleware.rate_limiting_middleware import rate_limit_exceeded_handler
from studyhub.shared.utils.logging_config import configure_logging

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


async def sweep_expired_tokens() -> None:
    """Remove expired refresh records and blacklist entries once."""
    async with get_session_local()() as session:
        manager = JWTTokenManager(JWTConfig.from_settings(), AsyncTokenRepository(session))
        await manager.cleanup_expired_tokens()


async def _token_cleanup_loop(interval_minutes: int) -> None:
    while True:
        await asyncio.sleep(interval_minutes * 60)
        try:
            await sweep_expired_tokens()
        except Exception:
            logger.exception("Error cleaning up expired tokens")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION} ({settings.ENVIRONMENT})")

    if settings.AUTO_CREATE_TABLES:
        await create_tables()

    cleanup_task = None
    if settings.TOKEN_CLEANUP_INTERVAL_MINUTES > 0:
        cleanup_task = asyncio.create_task(_token_cleanup_loop(settings.TOKEN_CLEANUP_INTERVAL_MINUTES))

    yield

    logger.info("Shutting down...")
    if cleanup_task is not None:
        cleanup_task.cancel()
        try:
            await cleanup_task
        except asyncio.CancelledError:
            pass
    await dispose_engine()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    register_all_events()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Authentication and session tokens for StudyHub",
        version=settings.VERSION,
        lifespan=lifespan,
        docs_url="/docs" if settings.SCHEMA_VISIBILITY else None,
        redoc_url="/redoc" if settings.SCHEMA_VISIBILITY else None,
        openapi_url="/openapi.json" if settings.SCHEMA_VISIBILITY else None,
    )

    # Starlette aplica os middlewares em ordem inversa (o último é o mais externo)
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(AsyncRequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    # Body validation errors use the same envelope as domain errors
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health", tags=["Health"])
    @limiter.exempt
    async def health(request: Request) -> dict:
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    """Entry point of the `studyhub-auth` console script."""
    import uvicorn

    uvicorn.run(
        "studyhub.main:app",
        host="0.0.0.0",
        port=8000,
        log_config=None,
        proxy_headers=True,
        forwarded_allow_ips=settings.FORWARDED_ALLOW_IPS,
    )


if __name__ == "__main__":
    run()
