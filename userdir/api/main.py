"""
Directory FastAPI application.

Initializes the directory app with its routers and observability
middleware, and configures the uvicorn server.

Dependencies: fastapi, userdir.api.routers, uvicorn
System role: Directory API entry point
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

import logging
from userdir import __version__
from userdir.boundary.db import dispose_async_engine
from userdir.configs import get_settings
from userdir.observability.logger import configure_logging
from userdir.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import health_router, query_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    logger = logging.getLogger("uvicorn")
    settings = get_settings()
    logger.info("%s starting (%s)", settings.service_name, settings.environment)

    yield

    # Shutdown
    await dispose_async_engine()
    logger.info("Database engine disposed")


def create_app() -> FastAPI:
    """
    Create and configure the directory FastAPI application.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="User Directory API",
        description="Read-only user directory with address and phone collections",
        version=__version__,
        lifespan=lifespan,
    )

    # Add observability middleware (last added runs first)
    app.add_middleware(
        RequestLoggingMiddleware,
        header_name=settings.observability.correlation_header,
    )
    app.add_middleware(
        CorrelationMiddleware,
        header_name=settings.observability.correlation_header,
    )

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(query_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "userdir.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
