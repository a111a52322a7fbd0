"""Application factory shared by the vote and results services."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi import Request as FastAPIRequest
from fastapi.responses import JSONResponse

from voting.api.health import build_health_router
from voting.core.config import ServiceName, Settings
from voting.core.logging import configure_logging
from voting.core.security_headers import SecurityHeadersMiddleware
from voting.db.migrate import run_migrations
from voting.db.session import build_engine, build_session_factory

logger = logging.getLogger(__name__)


def create_service_app(
    service: ServiceName,
    router: APIRouter,
    settings: Settings,
    migrate_on_startup: bool = True,
) -> FastAPI:
    """Build a FastAPI app for one service.

    Unless the caller already migrated, the votes table is created in the
    lifespan hook; a StartupError raised there aborts startup before any
    request is served.
    """
    configure_logging(settings.log_level)
    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if migrate_on_startup:
            run_migrations(engine)
        logger.info(
            "%s service started (options=%s, log_level=%s)",
            service.capitalize(),
            list(settings.options),
            settings.log_level,
        )
        yield
        engine.dispose()

    app = FastAPI(
        title=f"Voting {service} service",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: FastAPIRequest, exc: Exception) -> JSONResponse:
        """Catch unhandled exceptions and return a generic 500 response."""
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    app.add_middleware(SecurityHeadersMiddleware)

    app.include_router(build_health_router(service), tags=["health"])
    app.include_router(router, tags=[service])
    return app
