"""
User domain models.

Read-side shapes for the directory: a user with two independently owned
collections. Children reference their owner by ``user_id`` only; the
``addresses`` and ``phones`` lists on ``User`` are assembled at read time.

Dependencies: pydantic
System role: Directory record contracts (wire format uses camelCase)
"""

import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DirectoryModel(BaseModel):
    """Immutable base with camelCase wire aliases."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Address(DirectoryModel):
    """Postal address owned by a single user."""

    id: uuid.UUID
    user_id: uuid.UUID
    type: str = Field(description="Address kind, e.g. Home or Office")
    line1: str | None = None
    city: str | None = None
    postal_code: str | None = None
    country: str | None = None
    created_at: datetime
    updated_at: datetime


class Phone(DirectoryModel):
    """Phone number owned by a single user."""

    id: uuid.UUID
    user_id: uuid.UUID
    type: str = Field(description="Phone kind, e.g. Home or Office")
    number: str
    country_code: str | None = None
    created_at: datetime
    updated_at: datetime


class User(DirectoryModel):
    """Directory user with its addresses and phones."""

    id: uuid.UUID
    first_name: str
    last_name: str
    date_of_birth: date | None = None
    gender: str | None = None
    created_at: datetime
    updated_at: datetime
    addresses: list[Address] = Field(default_factory=list)
    phones: list[Phone] = Field(default_factory=list)


class SearchKey(DirectoryModel):
    """Compound equality key used by user search."""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    date_of_birth: date | None = None
