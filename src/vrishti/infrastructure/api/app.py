"""FastAPI application factory and configuration.

This module provides the application factory function for creating
and configuring the FastAPI application with all middleware, routes,
and lifecycle handlers.
"""

import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from vrishti.core.config import Settings, get_settings
from vrishti.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)
from vrishti.infrastructure.persistence.database import DatabaseManager
from vrishti.infrastructure.services.email import (
    EmailProvider,
    TemplateRenderer,
    build_email_provider,
)
from vrishti.infrastructure.services.notification_dispatcher import (
    NotificationDispatcher,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Initializes the store on startup. On shutdown, in-flight notifications
    get a grace period before the store is closed.
    """
    settings: Settings = app.state.settings
    configure_logging(settings)

    logger.info(
        "Starting Vrishti",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
        mail_configured=settings.mail_configured,
    )

    try:
        await app.state.db.init()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    yield

    logger.info("Shutting down Vrishti")

    dispatcher: NotificationDispatcher = app.state.notification_dispatcher
    abandoned = await dispatcher.drain(timeout=settings.notification_shutdown_timeout)
    if abandoned:
        logger.warning("Abandoning in-flight notifications", count=abandoned)

    await app.state.db.disconnect()
    logger.info("Database connection closed")


def create_app(
    settings: Settings | None = None,
    email_provider: EmailProvider | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The store handle and the notification dispatcher are built here and
    kept on ``app.state``; the lifespan handler owns their startup and
    shutdown.

    Args:
        settings: Settings to use instead of the environment.
        email_provider: Provider to use instead of the configured one.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Agricultural waste exchange between farmers and companies",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.db = DatabaseManager(settings)
    app.state.notification_dispatcher = NotificationDispatcher(
        provider=email_provider or build_email_provider(settings),
        renderer=TemplateRenderer(),
        settings=settings,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_health_check(app)
    register_routes(app)
    register_exception_handlers(app)
    register_middleware(app)

    return app


def register_health_check(app: FastAPI) -> None:
    """Register liveness and readiness endpoints."""

    @app.get("/", response_class=PlainTextResponse, tags=["health"])
    async def root() -> str:
        return f"{app.state.settings.app_name} backend is running!"

    @app.get("/health", tags=["health"])
    async def health_check():
        """Basic health check endpoint. Does not touch the database."""
        return {
            "status": "healthy",
            "service": app.state.settings.app_name,
            "version": app.state.settings.app_version,
        }

    @app.get("/ready", tags=["health"])
    async def readiness_check():
        """Readiness check endpoint, including database connectivity."""
        db: DatabaseManager = app.state.db
        if await db.check_connection():
            return {
                "status": "ready",
                "service": app.state.settings.app_name,
                "version": app.state.settings.app_version,
                "database": "connected",
            }
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "service": app.state.settings.app_name,
                "database": "disconnected",
            },
        )


def register_routes(app: FastAPI) -> None:
    """Register API routes."""
    from vrishti.infrastructure.api.routes import auth_router, wastes_router

    app.include_router(auth_router, prefix="/api", tags=["auth"])
    app.include_router(wastes_router, prefix="/api/wastes", tags=["wastes"])


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Answer malformed bodies with 400 and the offending fields."""
        details = [
            {
                "field": ".".join(str(part) for part in error["loc"] if part != "body"),
                "message": error["msg"],
                "code": error["type"],
            }
            for error in exc.errors()
        ]
        logger.info("Request validation failed", path=request.url.path, error_count=len(details))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Validation error", "details": details},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(
            "Unhandled exception",
            path=str(request.url),
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "detail": str(exc) if app.state.settings.debug else "An unexpected error occurred",
            },
        )


def register_middleware(app: FastAPI) -> None:
    """Register custom middleware."""

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log every request and tag it with a correlation ID."""
        correlation_id = request.headers.get("X-Correlation-ID", f"cid_{uuid.uuid4().hex[:12]}")
        bind_correlation_id(correlation_id)

        logger.info(
            "Request started",
            method=request.method,
            path=str(request.url.path),
        )

        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=str(request.url.path),
                status_code=response.status_code,
            )
            response.headers["X-Correlation-ID"] = correlation_id
            return response
        finally:
            clear_context()


# Create the application instance
app = create_app()
