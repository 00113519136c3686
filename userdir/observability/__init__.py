"""
Observability module.

Provides structured logging and correlation ID tracking.
"""

from userdir.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    new_correlation_id,
    set_correlation_id,
)
from userdir.observability.logger import configure_logging

__all__ = [
    "clear_correlation_id",
    "configure_logging",
    "get_correlation_id",
    "new_correlation_id",
    "set_correlation_id",
]
