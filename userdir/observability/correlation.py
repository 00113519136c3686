"""
Correlation ID context manager.

Manages correlation ID propagation across async boundaries using contextvars.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

from contextvars import ContextVar, Token
import uuid

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def new_correlation_id() -> str:
    """Generate a fresh correlation ID (UUID4 string)."""
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """
    Set correlation ID in context.

    Args:
        correlation_id: Optional correlation ID (generates new if None)

    Returns:
        Token: Token to hand back to clear_correlation_id
    """
    return correlation_id_ctx.set(correlation_id or new_correlation_id())


def get_correlation_id() -> str:
    """
    Get current correlation ID from context.

    Returns:
        str: Current correlation ID, empty string outside a traced call
    """
    return correlation_id_ctx.get()


def clear_correlation_id(token: Token[str] | None = None) -> None:
    """
    Clear correlation ID from context.

    Args:
        token: Token from set_correlation_id; restores the previous value
            when given, otherwise resets to empty
    """
    if token is not None:
        correlation_id_ctx.reset(token)
    else:
        correlation_id_ctx.set("")
