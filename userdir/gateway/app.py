"""
Gateway FastAPI application.

Exposes user endpoints that forward query documents to the directory's
query endpoint. One httpx.AsyncClient is shared for the app's lifetime.

Dependencies: fastapi, httpx, uvicorn, userdir.gateway
System role: Gateway API entry point
"""

import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI

from userdir import __version__
from userdir.api.routers.health import router as health_router
from userdir.configs import get_settings
from userdir.gateway.users_router import router as users_router
from userdir.observability.logger import configure_logging
from userdir.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared upstream client on startup and close it on shutdown."""
    logger = logging.getLogger("uvicorn")
    settings = get_settings()

    app.state.http_client = httpx.AsyncClient(
        timeout=settings.gateway.timeout_seconds,
    )
    logger.info(
        "%s gateway forwarding to %s (%s)",
        settings.service_name,
        settings.gateway.upstream_url,
        settings.environment,
    )

    yield

    await app.state.http_client.aclose()
    logger.info("Upstream client closed")


def create_gateway_app() -> FastAPI:
    """
    Create and configure the gateway FastAPI application.

    Returns:
        FastAPI: Configured gateway application
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="User Directory Gateway",
        description="Forwards parameterized user queries to the directory service",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        RequestLoggingMiddleware,
        header_name=settings.observability.correlation_header,
    )
    app.add_middleware(
        CorrelationMiddleware,
        header_name=settings.observability.correlation_header,
    )

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(users_router, prefix="/api/v1")

    return app


app = create_gateway_app()


if __name__ == "__main__":
    uvicorn.run(
        "userdir.gateway.app:app",
        host="0.0.0.0",
        port=8080,
    )
