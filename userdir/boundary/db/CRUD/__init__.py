"""
Read operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from userdir.boundary.db.CRUD import user_crud, address_crud, phone_crud

    user = await user_crud.get_by_id(db, user_id)
    rows = await address_crud.get_keyed_by_search(db, key)
"""

from userdir.boundary.db.CRUD.base_crud import BaseCRUD
from userdir.boundary.db.CRUD.owned_crud import OwnedCRUD, address_crud, phone_crud
from userdir.boundary.db.CRUD.user_crud import UserCRUD, user_crud

__all__ = [
    "BaseCRUD",
    "OwnedCRUD",
    "UserCRUD",
    "address_crud",
    "phone_crud",
    "user_crud",
]
