"""
Database boundary layer: ORM models, read operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - UserModel, AddressModel, PhoneModel: Directory entities
  - user_crud, address_crud, phone_crud: Read operation singletons
  - RecordStore, SqlRecordStore: Store contract and SQLAlchemy implementation

Dependencies: sqlalchemy, userdir.configs
System role: Database adapter providing read-only storage for users and
their address and phone collections.
"""

from userdir.boundary.db.base import Base, TimestampMixin, UUIDMixin
from userdir.boundary.db.connection import (
    dispose_async_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from userdir.boundary.db.models import AddressModel, PhoneModel, UserModel
from userdir.boundary.db.CRUD import (
    BaseCRUD,
    OwnedCRUD,
    UserCRUD,
    address_crud,
    phone_crud,
    user_crud,
)
from userdir.boundary.db.record_store import RecordStore, SqlRecordStore

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "dispose_async_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "UserModel",
    "AddressModel",
    "PhoneModel",
    # CRUD
    "BaseCRUD",
    "OwnedCRUD",
    "UserCRUD",
    "address_crud",
    "phone_crud",
    "user_crud",
    # Store
    "RecordStore",
    "SqlRecordStore",
]
