"""
Entity-graph assembly.

Rebuilds users with both collections from two independently fetched,
flat (owner, child) lists. Fetching each collection on its own keeps the
row count at |addresses| + |phones| per user instead of the
|addresses| x |phones| a single two-way join would produce; this module
performs the keyed rejoin.

Search is anchored on the address rows: a user that only appears in the
phone rows is not part of the result.

Dependencies: userdir.models
System role: Pure, in-memory parent/children rejoin for user search
"""

import logging
from collections import defaultdict
from typing import Sequence
from uuid import UUID

from userdir.models.user import Address, Phone, User

logger = logging.getLogger(__name__)


class GraphAssembler:
    """Merge keyed address and phone rows into distinct, populated users."""

    def assemble(
        self,
        address_rows: Sequence[tuple[User, Address]],
        phone_rows: Sequence[tuple[User, Phone]],
    ) -> list[User]:
        """
        Assemble users from keyed child rows.

        Args:
            address_rows: (owner, address) pairs; defines which users appear and their order
            phone_rows: (owner, phone) pairs; attached to users already seen in address_rows

        Returns:
            list[User]: One entry per distinct owner in first-seen order, each
            with only its own addresses and phones
        """
        shells: dict[UUID, User] = {}
        addresses: dict[UUID, list[Address]] = {}
        dropped = 0

        for owner, address in address_rows:
            if address.user_id != owner.id:
                dropped += 1
                continue
            if owner.id not in shells:
                shells[owner.id] = owner
                addresses[owner.id] = []
            addresses[owner.id].append(address)

        phones_by_owner: dict[UUID, list[Phone]] = defaultdict(list)
        for owner, phone in phone_rows:
            if phone.user_id != owner.id or owner.id not in shells:
                dropped += 1
                continue
            phones_by_owner[owner.id].append(phone)

        if dropped:
            logger.debug(
                "Dropped child rows without a matching owner",
                extra={"dropped": dropped},
            )

        return [
            shell.model_copy(
                update={
                    "addresses": addresses[user_id],
                    "phones": phones_by_owner.get(user_id, []),
                }
            )
            for user_id, shell in shells.items()
        ]
