"""
FastAPI middleware for observability.

Correlation ID and request logging middleware shared by the directory and
gateway applications.

Dependencies: fastapi, starlette, userdir.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from userdir.observability.correlation import clear_correlation_id, set_correlation_id
from userdir.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one record per request.

    Query strings are left out: gateway search parameters carry user names
    and birth dates. The record notes whether the caller supplied a
    correlation ID or one was generated for it.
    """

    def __init__(self, app: ASGIApp, header_name: str = "X-Correlation-ID") -> None:
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next):
        """
        Time the request and log its outcome.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response from the wrapped app
        """
        started = time.perf_counter()
        context = {
            "method": request.method,
            "path": request.url.path,
            "trace_origin": "caller" if self.header_name in request.headers else "generated",
        }

        try:
            response: Response = await call_next(request)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{request.method} {request.url.path} failed",
                e,
                duration_ms=_elapsed_ms(started),
                **context,
            )
            raise

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        log_with_context(
            logger,
            level,
            f"{request.method} {request.url.path} -> {response.status_code}",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(started),
            **context,
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware for correlation ID injection."""

    def __init__(self, app: ASGIApp, header_name: str = "X-Correlation-ID") -> None:
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next):
        """
        Bind the inbound (or a fresh) correlation ID for the request.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response with correlation ID header
        """
        token = set_correlation_id(request.headers.get(self.header_name))
        try:
            response: Response = await call_next(request)
            response.headers[self.header_name] = token.var.get()
            return response
        finally:
            clear_correlation_id(token)
