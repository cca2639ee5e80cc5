"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from myflix.api.error_handlers import register_exception_handlers
from myflix.api.middleware.request_logging import RequestLoggingMiddleware
from myflix.api.v1 import auth_router, beer_router, brewery_router, movie_router, user_router
from myflix.core.config import get_settings
from myflix.core.logging_config import setup_logging
from myflix.infrastructure.db.mongo_connection import get_mongo_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and close the Mongo connection pool on shutdown."""
    settings = get_settings()
    logger.info(f"myFlix API starting (storage backend: {settings.storage_backend})")
    yield
    if settings.storage_backend == "mongo":
        get_mongo_client().close()
    logger.info("myFlix API stopped")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware restricted to ALLOWED_ORIGINS
    - Request logging middleware
    - Exception handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    setup_logging()

    application = FastAPI(
        title="myFlix API",
        description="Movie catalog with user favorites and to-watch lists",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(application)

    # Register API routers
    application.include_router(auth_router)
    application.include_router(movie_router, prefix="/movies")
    application.include_router(user_router, prefix="/users")
    application.include_router(beer_router, prefix="/beers")
    application.include_router(brewery_router, prefix="/breweries")

    @application.get("/", response_class=PlainTextResponse)
    async def root():
        """Welcome text."""
        return "myFlix. All the greats, in one place!"

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()
