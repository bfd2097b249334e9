"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import AuthenticationError, GatehouseError
from modules.profiles.routes import router as profile_router
from modules.sessions.routes import router as session_router

from .models.errors import ErrorResponse
from .routes import health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; log-on will fail until it is configured")
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


async def gatehouse_error_handler(request: Request, exc: GatehouseError) -> JSONResponse:
    """Render GatehouseError subclasses that escape route handlers."""
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    if exc.status_code >= 500:
        logger.error("Request to %s failed: %s", request.url.path, exc.message)

    body = ErrorResponse.from_error(exc)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(), headers=headers)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Profile registration and session authentication API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(GatehouseError, gatehouse_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(profile_router, prefix="/api/v1/profile", tags=["profile"])
    app.include_router(session_router, prefix="/api/v1/session", tags=["session"])

    return app


# Application instance for uvicorn
app = create_app()
