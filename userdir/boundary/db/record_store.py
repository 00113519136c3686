"""
Record store: read-only access to users and their collections.

``RecordStore`` is the contract the directory service depends on;
``SqlRecordStore`` implements it on an async SQLAlchemy session.

Dependencies: sqlalchemy, userdir.boundary.db.CRUD, userdir.boundary.db.mappers
System role: Storage collaborator of the directory service
"""

import logging
from typing import Protocol
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from userdir.boundary.db.CRUD import address_crud, phone_crud, user_crud
from userdir.boundary.db.mappers import to_address, to_phone, to_user
from userdir.core.exceptions import RecordNotFoundError
from userdir.models.user import Address, Phone, SearchKey, User

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    """Read-only record store contract."""

    async def find_by_id(self, record_id: str | UUID) -> User:
        """Return the user without children; raise RecordNotFoundError if absent."""
        ...

    async def find_addresses_by_key(self, key: SearchKey) -> list[tuple[User, Address]]:
        """Return (owner, address) pairs for users matching the key."""
        ...

    async def find_phones_by_key(self, key: SearchKey) -> list[tuple[User, Phone]]:
        """Return (owner, phone) pairs for users matching the key."""
        ...

    async def find_children_of(self, record_id: UUID) -> tuple[list[Address], list[Phone]]:
        """Return both collections of one known user."""
        ...


def parse_record_id(record_id: str | UUID) -> UUID:
    """
    Coerce an identifier to UUID.

    Raises:
        RecordNotFoundError: If the value is not a valid UUID (no such record can exist)
    """
    if isinstance(record_id, UUID):
        return record_id
    try:
        return UUID(str(record_id))
    except ValueError:
        raise RecordNotFoundError(str(record_id), {"reason": "malformed identifier"}) from None


class SqlRecordStore:
    """RecordStore backed by an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize record store with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def find_by_id(self, record_id: str | UUID) -> User:
        """
        Fetch one user without children.

        Args:
            record_id: User UUID (or its string form)

        Returns:
            User: Childless user

        Raises:
            RecordNotFoundError: If no user has this identifier
        """
        user_id = parse_record_id(record_id)
        row = await user_crud.get_by_id(self.db, user_id)
        if row is None:
            raise RecordNotFoundError(str(user_id))
        return to_user(row)

    async def find_addresses_by_key(self, key: SearchKey) -> list[tuple[User, Address]]:
        rows = await address_crud.get_keyed_by_search(self.db, key)
        logger.debug("Fetched keyed addresses", extra={"row_count": len(rows)})
        return [(to_user(user), to_address(address)) for user, address in rows]

    async def find_phones_by_key(self, key: SearchKey) -> list[tuple[User, Phone]]:
        rows = await phone_crud.get_keyed_by_search(self.db, key)
        logger.debug("Fetched keyed phones", extra={"row_count": len(rows)})
        return [(to_user(user), to_phone(phone)) for user, phone in rows]

    async def find_children_of(self, record_id: UUID) -> tuple[list[Address], list[Phone]]:
        addresses = await address_crud.get_by_owner(self.db, record_id)
        phones = await phone_crud.get_by_owner(self.db, record_id)
        return [to_address(a) for a in addresses], [to_phone(p) for p in phones]
