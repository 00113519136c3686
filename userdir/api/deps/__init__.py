"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_directory_service,
    get_query_service,
    get_record_store,
    get_settings_dependency,
)

__all__ = [
    "get_directory_service",
    "get_query_service",
    "get_record_store",
    "get_settings_dependency",
]
