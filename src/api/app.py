"""FastAPI application factory.

``create_app()`` wires the origin guard, the trust-center CSP header, the
sanitizing logger and the database retry engine into a single ``FastAPI``
instance. Route handlers are mounted by the services that own them.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.features.origin.guard import OriginAccessGuard
from src.features.origin.middleware import (
    GuardedCORSMiddleware,
    TrustCenterCSPMiddleware,
)
from src.features.redaction.logger import SanitizingLogger, create_sanitizing_logger
from src.features.redaction.sinks import LogSink
from src.features.retry.engine import RetryEngine
from src.settings.app import AppSettings, get_settings


API_TITLE = "isms-backend"
API_VERSION = "0.1.0"


def create_origin_guard(settings: AppSettings) -> OriginAccessGuard:
    """Build the origin guard from settings.

    Args:
        settings: Service settings.

    Returns:
        Guard allowing the configured trust-center origins, plus
        localhost origins in development.
    """
    return OriginAccessGuard(
        settings.trust_center_origins,
        allow_local_development=settings.is_development,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup / shutdown log entries."""
    log: SanitizingLogger = app.state.log
    settings: AppSettings = app.state.settings
    log.info(
        "API starting",
        {
            "version": app.version,
            "environment": settings.environment,
            "trust_center_origins": len(app.state.origin_guard.patterns),
        },
    )
    yield
    log.info("API shutting down")


def create_app(
    settings: AppSettings | None = None,
    sink: LogSink | None = None,
) -> FastAPI:
    """Build and return a configured FastAPI application.

    Args:
        settings: Override settings (useful for testing). When None,
            settings are read from the environment once, here.
        sink: Log sink for the sanitizing logger. Defaults to structlog.

    Returns:
        FastAPI application.
    """
    settings = settings or get_settings()
    log = (
        SanitizingLogger(sink) if sink is not None else create_sanitizing_logger("api")
    )
    guard = create_origin_guard(settings)

    app = FastAPI(title=API_TITLE, version=API_VERSION, lifespan=lifespan)

    # Process-lifetime collaborators for route handlers
    app.state.settings = settings
    app.state.log = log
    app.state.origin_guard = guard
    app.state.retry_engine = RetryEngine(
        log, default_options=settings.retry_options()
    )

    # Added innermost first; CORS must be outermost to answer preflights
    app.add_middleware(TrustCenterCSPMiddleware)
    app.add_middleware(GuardedCORSMiddleware, guard=guard, logger=log)

    @app.get("/api/health", tags=["health"])
    async def health() -> dict[str, str]:
        """Liveness check."""
        return {"status": "ok"}

    return app
