"""Service orchestrators."""

from .directory_service import DirectoryService
from .query_service import QueryService

__all__ = [
    "DirectoryService",
    "QueryService",
]
