"""FastAPI application factory and configuration.

This module provides the application factory function for creating
and configuring the FastAPI application with all middleware, routes,
and lifecycle handlers.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from schooldir.core.config import Settings, get_settings
from schooldir.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
    new_correlation_id,
)
from schooldir.domain.services.submission_guard import SubmissionGuard
from schooldir.infrastructure.api.dependencies import DirectoryClient
from schooldir.infrastructure.clients.school_directory_client import SchoolDirectoryClient
from schooldir.infrastructure.web.templating import STATIC_DIR

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Opens the shared collaborator client on startup and closes it on shutdown.

    Args:
        app: FastAPI application instance.

    Yields:
        None: Control is yielded to the application during its lifetime.
    """
    settings: Settings = app.state.settings
    configure_logging(settings)

    logger.info(
        "Starting SchoolDir",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
        directory_base_url=settings.directory_base_url,
    )

    client = SchoolDirectoryClient.from_settings(settings)
    app.state.directory_client = client

    yield

    logger.info("Shutting down SchoolDir")
    await client.aclose()
    logger.info("School directory client closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Register and browse schools",
        docs_url="/docs" if settings.is_development else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.submission_guard = SubmissionGuard()

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    register_health_check(app)
    register_routes(app)
    register_exception_handlers(app)
    register_middleware(app)

    return app


def register_health_check(app: FastAPI) -> None:
    """Register health check endpoints.

    Args:
        app: FastAPI application instance.
    """

    @app.get("/health", tags=["health"])
    async def health_check(request: Request):
        """Basic health check. Does not contact the school directory."""
        return {
            "status": "healthy",
            "service": "SchoolDir",
            "version": request.app.state.settings.app_version,
        }

    @app.get("/ready", tags=["health"])
    async def readiness_check(request: Request, client: DirectoryClient):
        """Readiness check, including reachability of the school directory."""
        if await client.ping():
            return {
                "status": "ready",
                "service": "SchoolDir",
                "version": request.app.state.settings.app_version,
                "directory": "reachable",
            }
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "service": "SchoolDir",
                "directory": "unreachable",
            },
        )

    @app.get("/live", tags=["health"])
    async def liveness_check(request: Request):
        return {
            "status": "alive",
            "service": "SchoolDir",
            "version": request.app.state.settings.app_version,
        }


def register_routes(app: FastAPI) -> None:
    """Register page routes.

    Args:
        app: FastAPI application instance.
    """
    from schooldir.infrastructure.api.routes import (
        add_school_router,
        home_router,
        schools_router,
    )

    app.include_router(home_router)
    app.include_router(add_school_router)
    app.include_router(schools_router)


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application instance.
    """

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        debug = request.app.state.settings.debug
        logger.error(
            "Unhandled exception",
            path=str(request.url),
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": str(exc) if debug else "An unexpected error occurred",
            },
        )


def register_middleware(app: FastAPI) -> None:
    """Register custom middleware.

    Args:
        app: FastAPI application instance.
    """

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log every request and tag it with a correlation ID."""
        correlation_id = request.headers.get("X-Correlation-ID") or new_correlation_id()
        bind_correlation_id(correlation_id)

        logger.info(
            "Request started",
            method=request.method,
            path=request.url.path,
        )

        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
            )
            response.headers["X-Correlation-ID"] = correlation_id
            return response
        finally:
            clear_context()


# Create the application instance
app = create_app()
