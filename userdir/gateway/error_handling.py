"""
Gateway error handling utilities.

Decorator translating gateway failures into HTTP responses. Upstream
error entries are passed through verbatim in the response body.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from userdir.core.exceptions import TemplateNotFoundError, TransportError, UpstreamError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _entry_code(entry: Any) -> Any:
    extensions = entry.get("extensions") if isinstance(entry, dict) else None
    return extensions.get("code") if isinstance(extensions, dict) else None


def _is_not_found(error: UpstreamError) -> bool:
    codes = [_entry_code(entry) for entry in error.errors]
    return bool(codes) and all(code == "NOT_FOUND" for code in codes)


def handle_gateway_errors(func: F) -> F:
    """
    Decorator to map gateway exceptions onto HTTPExceptions.

    - UpstreamError: 404 when every entry is NOT_FOUND, else 502
    - TransportError: 503
    - TemplateNotFoundError: 500 (deployment problem, not a caller error)
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except UpstreamError as e:
            not_found = _is_not_found(e)
            logger.warning(
                "Upstream query failed",
                extra={"error_count": len(e.errors), "not_found": not_found},
            )
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND if not_found else status.HTTP_502_BAD_GATEWAY,
                detail={"errors": e.errors},
            )

        except TransportError as e:
            logger.warning("Upstream transport failure", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=e.message,
            )

        except TemplateNotFoundError as e:
            logger.error("Query template missing", extra={"template": e.name})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=e.message,
            )

    return wrapper  # type: ignore
