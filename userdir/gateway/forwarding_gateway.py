"""
Forwarding gateway.

Binds parameters into a named query document, posts it to the upstream
query endpoint and unwraps the ``{data, errors}`` envelope.

Any non-empty ``errors`` list fails the call, even when ``data`` is also
populated. Error entries are passed on as received, whatever their
shape. Transport problems fail immediately; there is no retry.

Dependencies: httpx, userdir.gateway.template_registry
System role: Client-side query forwarding
"""

import logging
from typing import Any, Mapping

import httpx

from userdir.core.exceptions import TransportError, UpstreamError
from userdir.gateway.template_registry import QueryTemplateRegistry
from userdir.observability.correlation import clear_correlation_id, set_correlation_id
from userdir.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class ForwardingGateway:
    """
    Proxy for parameterized queries against an upstream query endpoint.

    Example:
        >>> async with httpx.AsyncClient() as client:
        ...     gateway = ForwardingGateway(
        ...         registry=QueryTemplateRegistry.default(),
        ...         client=client,
        ...         endpoint="http://localhost:8000/api/v1/query",
        ...     )
        ...     data = await gateway.call("userById", {"id": user_id})
    """

    def __init__(
        self,
        registry: QueryTemplateRegistry,
        client: httpx.AsyncClient,
        endpoint: str,
        timeout: float | None = None,
        correlation_header: str = "X-Correlation-ID",
    ) -> None:
        """
        Initialize gateway.

        Args:
            registry: Source of query documents
            client: Shared async HTTP client (owned by the caller)
            endpoint: Upstream query endpoint URL
            timeout: Per-request timeout in seconds (client default when None)
            correlation_header: Header carrying the per-call correlation ID
        """
        self.registry = registry
        self.client = client
        self.endpoint = endpoint
        self.timeout = timeout
        self.correlation_header = correlation_header

    def build_request_body(self, template_name: str, params: Mapping[str, Any]) -> dict[str, Any]:
        """
        Build the upstream request body.

        Args:
            template_name: Registered query template
            params: Variable bindings

        Returns:
            dict: ``{"query": <document>, "variables": <params>}``

        Raises:
            TemplateNotFoundError: If the template is not registered
        """
        return {"query": self.registry.get(template_name), "variables": dict(params)}

    async def call(self, template_name: str, params: Mapping[str, Any] | None = None) -> Any:
        """
        Forward a named query and return the envelope's data.

        Args:
            template_name: Registered query template
            params: Variable bindings

        Returns:
            Any: The ``data`` member of the envelope

        Raises:
            TemplateNotFoundError: If the template is not registered
            UpstreamError: If the envelope carries a non-empty ``errors`` list
            TransportError: On timeout, connection failure, non-2xx status or a
                body that is not an envelope
        """
        body = self.build_request_body(template_name, params or {})

        token = set_correlation_id()
        correlation_id = token.var.get()
        try:
            log_with_context(
                logger,
                logging.INFO,
                "Forwarding query",
                template=template_name,
                endpoint=self.endpoint,
                variables=body["variables"],
            )
            payload = await self._post(body, correlation_id)
            return self._unwrap(payload)
        finally:
            clear_correlation_id(token)

    async def _post(self, body: dict[str, Any], correlation_id: str) -> Any:
        request_options: dict[str, Any] = {
            "json": body,
            "headers": {self.correlation_header: correlation_id},
        }
        if self.timeout is not None:
            request_options["timeout"] = self.timeout

        try:
            response = await self.client.post(self.endpoint, **request_options)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.warning("Upstream timed out", extra={"endpoint": self.endpoint})
            raise TransportError(f"Upstream timed out: {e}", url=self.endpoint) from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(
                "Upstream returned non-success status",
                extra={"endpoint": self.endpoint, "status_code": status_code},
            )
            raise TransportError(
                f"Upstream returned HTTP {status_code}",
                url=self.endpoint,
                status_code=status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.warning(
                "Upstream unreachable",
                extra={"endpoint": self.endpoint, "error_type": type(e).__name__},
            )
            raise TransportError(f"Upstream unreachable: {e}", url=self.endpoint) from e

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                "Upstream response is not JSON",
                url=self.endpoint,
                status_code=response.status_code,
            ) from e

    def _unwrap(self, payload: Any) -> Any:
        if not isinstance(payload, Mapping):
            raise TransportError("Upstream response is not a query envelope", url=self.endpoint)

        errors = payload.get("errors")
        if errors is not None and not isinstance(errors, list):
            raise TransportError("Upstream envelope has a malformed errors member", url=self.endpoint)

        data = payload.get("data")
        if errors:
            logger.warning(
                "Upstream returned errors",
                extra={"error_count": len(errors), "has_data": data is not None},
            )
            raise UpstreamError(errors, data=data)

        return data
