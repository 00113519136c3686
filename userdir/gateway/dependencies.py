"""
Gateway dependency factories.

The HTTP client lives on ``app.state`` (opened and closed by the app
lifespan); registry and gateway are built from settings.

Dependencies: fastapi, httpx, userdir.configs
System role: DI container for the gateway app
"""

from functools import lru_cache

import httpx
from fastapi import Depends, Request

from userdir.configs import Settings, get_settings
from userdir.gateway.forwarding_gateway import ForwardingGateway
from userdir.gateway.template_registry import QueryTemplateRegistry


@lru_cache
def get_template_registry() -> QueryTemplateRegistry:
    """
    Get the query template registry, loaded once.

    Uses GATEWAY_TEMPLATES_DIR when set, otherwise the shipped documents.
    """
    templates_dir = get_settings().gateway.templates_dir
    if templates_dir is not None:
        return QueryTemplateRegistry.from_directory(templates_dir)
    return QueryTemplateRegistry.default()


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Get the shared HTTP client opened by the app lifespan."""
    return request.app.state.http_client


def get_forwarding_gateway(
    client: httpx.AsyncClient = Depends(get_http_client),
    registry: QueryTemplateRegistry = Depends(get_template_registry),
    settings: Settings = Depends(get_settings),
) -> ForwardingGateway:
    """
    Get forwarding gateway instance.

    Args:
        client: Shared HTTP client (injected via Depends)
        registry: Query template registry (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        ForwardingGateway: Gateway bound to the configured upstream
    """
    return ForwardingGateway(
        registry=registry,
        client=client,
        endpoint=settings.gateway.upstream_url,
        timeout=settings.gateway.timeout_seconds,
        correlation_header=settings.observability.correlation_header,
    )
