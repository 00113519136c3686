"""
Query endpoint error handling.

Decorator that turns unexpected failures into an INTERNAL_ERROR envelope
so the query endpoint always answers with the ``{data, errors}`` shape.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from userdir.application.services.query_service import INTERNAL_ERROR, error_envelope
from userdir.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_query_errors(func: F) -> F:
    """
    Decorator to convert unexpected exceptions into an error envelope.

    Directory errors are already mapped by QueryService; anything reaching
    this decorator is logged with its traceback.
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except Exception as e:
            log_exception_with_context(logger, "Unexpected failure executing query", e)
            return error_envelope(
                "Internal error while executing query", INTERNAL_ERROR
            ).model_dump(mode="json", exclude_unset=True)

    return wrapper  # type: ignore
