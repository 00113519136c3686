"""
Directory service orchestrator.

Answers the two read queries of the directory: fetch one user by
identifier and search users by compound key.

Dependencies: userdir.boundary.db.record_store, userdir.core
System role: Directory use case orchestration
"""

import logging
from uuid import UUID

from userdir.boundary.db.record_store import RecordStore
from userdir.core.graph_assembler import GraphAssembler
from userdir.models.user import SearchKey, User

logger = logging.getLogger(__name__)


class DirectoryService:
    """Directory service orchestrator."""

    def __init__(self, store: RecordStore, assembler: GraphAssembler | None = None) -> None:
        """
        Initialize directory service.

        Args:
            store: Read-only record store
            assembler: Graph assembler (a default instance when omitted)
        """
        self.store = store
        self.assembler = assembler or GraphAssembler()

    async def get_by_id(self, record_id: str | UUID) -> User:
        """
        Get one user with both collections.

        Args:
            record_id: User identifier

        Returns:
            User: Fully populated user

        Raises:
            RecordNotFoundError: If the user does not exist
        """
        user = await self.store.find_by_id(record_id)
        addresses, phones = await self.store.find_children_of(user.id)
        logger.info(
            "User fetched",
            extra={"user_id": str(user.id), "addresses": len(addresses), "phones": len(phones)},
        )
        return user.model_copy(update={"addresses": addresses, "phones": phones})

    async def search(self, key: SearchKey) -> list[User]:
        """
        Search users by compound key.

        Users are matched through their addresses; a user with phones but
        no addresses is not returned.

        Args:
            key: Search key

        Returns:
            list[User]: Matching users, empty when nothing matches
        """
        address_rows = await self.store.find_addresses_by_key(key)
        phone_rows = await self.store.find_phones_by_key(key)
        users = self.assembler.assemble(address_rows, phone_rows)
        logger.info(
            "User search completed",
            extra={
                "address_rows": len(address_rows),
                "phone_rows": len(phone_rows),
                "matches": len(users),
            },
        )
        return users
