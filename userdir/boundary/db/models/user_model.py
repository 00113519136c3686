"""
User ORM model.

Represents a directory user. Addresses and phones reference users by
foreign key only; the user model declares no relationships to them.

Dependencies: sqlalchemy, userdir.boundary.db.base
System role: User persistence
"""

from datetime import date

from sqlalchemy import Date, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from userdir.boundary.db.base import Base, UUIDMixin, TimestampMixin


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    User ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        first_name: Given name (search key part)
        last_name: Family name (search key part)
        date_of_birth: Optional birth date (optional search filter)
        gender: Optional category code
        created_at: Row creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "users"
    __table_args__ = (Index("ix_users_name", "first_name", "last_name"),)

    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True, default=None)
    gender: Mapped[str | None] = mapped_column(String(32), nullable=True, default=None)
