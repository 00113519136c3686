"""
Database models package.

Exports:
  - UserModel: Directory user ORM model
  - AddressModel: Address rows owned by a user
  - PhoneModel: Phone rows owned by a user

Dependencies: sqlalchemy, userdir.boundary.db.base
System role: Database model definitions for directory entities
"""

from userdir.boundary.db.models.user_model import UserModel
from userdir.boundary.db.models.address_model import AddressModel
from userdir.boundary.db.models.phone_model import PhoneModel

__all__ = [
    "UserModel",
    "AddressModel",
    "PhoneModel",
]
