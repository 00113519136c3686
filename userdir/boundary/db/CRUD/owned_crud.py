"""
Read operations for user-owned child collections.

Addresses and phones share the same shape of access: by owner ID, or
joined with their owning user filtered by a search key. Each query touches
exactly one child table, so a user with N addresses yields N rows here and
never N x M.

Dependencies: sqlalchemy, userdir.boundary.db.models
System role: Child collection persistence reads
"""

from typing import Sequence, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from userdir.boundary.db.models.address_model import AddressModel
from userdir.boundary.db.models.phone_model import PhoneModel
from userdir.boundary.db.models.user_model import UserModel
from userdir.boundary.db.CRUD.base_crud import BaseCRUD
from userdir.models.user import SearchKey

ChildT = TypeVar("ChildT", AddressModel, PhoneModel)


class OwnedCRUD(BaseCRUD[ChildT]):
    """
    Read operations for a child model carrying a ``user_id`` foreign key.

    Extends BaseCRUD with owner-scoped and search-key-scoped queries.
    """

    async def get_by_owner(
        self,
        session: AsyncSession,
        user_id: UUID,
    ) -> Sequence[ChildT]:
        """
        Retrieve all children of one user.

        Args:
            session: Async database session
            user_id: Owning user UUID

        Returns:
            Sequence of child rows in fetch order
        """
        stmt = select(self.model).where(self.model.user_id == user_id)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_keyed_by_search(
        self,
        session: AsyncSession,
        key: SearchKey,
    ) -> list[tuple[UserModel, ChildT]]:
        """
        Retrieve (owner, child) pairs for users matching a search key.

        Users without any child of this kind produce no rows.

        Args:
            session: Async database session
            key: Search key (first/last name, optional date of birth)

        Returns:
            list of (UserModel, child) tuples in fetch order
        """
        stmt = (
            select(UserModel, self.model)
            .join(self.model, self.model.user_id == UserModel.id)
            .where(
                UserModel.first_name == key.first_name,
                UserModel.last_name == key.last_name,
            )
        )
        if key.date_of_birth is not None:
            stmt = stmt.where(UserModel.date_of_birth == key.date_of_birth)
        result = await session.execute(stmt)
        return [(user, child) for user, child in result.tuples().all()]


address_crud = OwnedCRUD(AddressModel)
phone_crud = OwnedCRUD(PhoneModel)
