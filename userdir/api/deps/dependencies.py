"""
Dependency injection container.

Factory functions for FastAPI dependencies. Each request gets its own
session, store and services; nothing is registered globally.

Dependencies: userdir.configs, userdir.application, userdir.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from userdir.configs import Settings, get_settings
from userdir.boundary.db import get_async_db
from userdir.boundary.db.record_store import RecordStore, SqlRecordStore
from userdir.application.services import DirectoryService, QueryService


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_record_store(db: AsyncSession = Depends(get_async_db)) -> RecordStore:
    """
    Get record store bound to the request's database session.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        RecordStore: SQLAlchemy-backed record store
    """
    return SqlRecordStore(db=db)


def get_directory_service(store: RecordStore = Depends(get_record_store)) -> DirectoryService:
    """
    Get directory service instance.

    Args:
        store: Record store (injected via Depends)

    Returns:
        DirectoryService: Directory service instance
    """
    return DirectoryService(store=store)


def get_query_service(
    directory: DirectoryService = Depends(get_directory_service),
) -> QueryService:
    """
    Get query service instance.

    Args:
        directory: Directory service (injected via Depends)

    Returns:
        QueryService: Query service resolving documents onto the directory
    """
    return QueryService(directory=directory)
