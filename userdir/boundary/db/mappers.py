"""
Explicit ORM-to-domain mapping functions.

One function per shape pair; every field is copied by name so that a new
column never leaks into the read model unnoticed.

Dependencies: userdir.boundary.db.models, userdir.models
System role: Row to domain model translation
"""

from userdir.boundary.db.models import AddressModel, PhoneModel, UserModel
from userdir.models.user import Address, Phone, User


def to_user(row: UserModel) -> User:
    """Map a user row to a childless User."""
    return User(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        date_of_birth=row.date_of_birth,
        gender=row.gender,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def to_address(row: AddressModel) -> Address:
    """Map an address row to an Address."""
    return Address(
        id=row.id,
        user_id=row.user_id,
        type=row.type,
        line1=row.line1,
        city=row.city,
        postal_code=row.postal_code,
        country=row.country,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def to_phone(row: PhoneModel) -> Phone:
    """Map a phone row to a Phone."""
    return Phone(
        id=row.id,
        user_id=row.user_id,
        type=row.type,
        number=row.number,
        country_code=row.country_code,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
