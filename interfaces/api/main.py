"""Main FastAPI application."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from application.ports.blob_store import BlobStore
from infrastructure.config import settings
from infrastructure.logging import setup_logging
from interfaces.api.middleware import register_exception_handlers
from interfaces.api.routes.blob_routes import router as blob_router
from interfaces.dependencies import get_container

# Configure structured logging
setup_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:  # noqa: ARG001
    """Handle application startup and shutdown."""
    logger.info("app_starting", env=settings.app_env)

    # Make sure the configured containers exist
    try:
        blob_store = get_container()[BlobStore]
        for container_name in settings.container_names:
            if not blob_store.container_exists(container_name):
                blob_store.create_container(container_name)
                logger.info("blob_container_created", container=container_name)
    except Exception as e:  # noqa: BLE001
        logger.warning("blob_container_initialization_failed", error=str(e))
        # Don't fail startup - requests against missing containers report it themselves

    logger.info("app_ready")

    yield

    logger.info("app_shutting_down")
    logger.info("app_stopped")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Blob Storage API",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure properly for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(blob_router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Create app instance
app = create_app()
