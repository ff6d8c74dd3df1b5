"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_mapper import __version__
from todo_mapper.api.routes import comments_router, health_router
from todo_mapper.config import get_settings
from todo_mapper.logging import configure_logging, get_logger
from todo_mapper.parsers import get_front_end_registry

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    # Configure logging first
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler for startup/shutdown."""
        logger.info("application_starting", version=__version__)

        # Load the tree-sitter grammars before the first request
        get_front_end_registry()

        yield

        logger.info("application_stopped")

    app = FastAPI(
        title="TODO Mapper API",
        description="Locates TODO comments in source code and reports their enclosing scopes",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router)
    app.include_router(comments_router, prefix="/api/v1")

    logger.info(
        "application_configured",
        debug=settings.debug,
        app_name=settings.app_name,
    )

    return app
