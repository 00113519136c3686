"""
Structured logging helpers.

Context values are flattened to short strings before they reach a log
record. Mappings (query variables, upstream payloads) are rendered by key
name only, so names and birth dates of directory users never appear in
logs.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any
from uuid import UUID

MAX_VALUE_LENGTH = 200


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Render a context value for a log record.

    Args:
        value: Value to render
        max_length: Length after which the rendering is cut

    Returns:
        str: ``None``, the string itself, ``keys[a,b]`` for mappings,
        ``<type>(<n> items)`` for lists and tuples, ISO text for dates
    """
    try:
        if value is None:
            rendered = "None"
        elif isinstance(value, str):
            rendered = value
        elif isinstance(value, Mapping):
            rendered = f"keys[{','.join(sorted(str(k) for k in value))}]"
        elif isinstance(value, (list, tuple)):
            rendered = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, date):
            rendered = value.isoformat()
        elif isinstance(value, UUID):
            rendered = str(value)
        else:
            rendered = str(value)
    except Exception as e:
        return f"<unloggable {type(e).__name__}>"

    if len(rendered) > max_length:
        return f"{rendered[:max_length]}...(+{len(rendered) - max_length})"
    return rendered


def _render_context(context: Mapping[str, Any]) -> dict[str, str]:
    return {key: safe_log_value(val) for key, val in context.items()}


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message with rendered context attached as record attributes.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Attributes to attach to the record
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=_render_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an exception with traceback and rendered context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception being reported
        **context: Attributes to attach to the record
    """
    extra = _render_context(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.error(message, exc_info=exc, extra=extra)
