"""
Address ORM model.

Dependencies: sqlalchemy, userdir.boundary.db.base
System role: Address persistence (one-to-many from users)
"""

from uuid import UUID

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from userdir.boundary.db.base import Base, UUIDMixin, TimestampMixin


class AddressModel(Base, UUIDMixin, TimestampMixin):
    """
    Address row owned by exactly one user.

    Deleting the user deletes its addresses (ON DELETE CASCADE).
    """

    __tablename__ = "addresses"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="Owning user ID",
    )
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    line1: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    city: Mapped[str | None] = mapped_column(String(128), nullable=True, default=None)
    postal_code: Mapped[str | None] = mapped_column(String(32), nullable=True, default=None)
    country: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
