"""
Phone ORM model.

Dependencies: sqlalchemy, userdir.boundary.db.base
System role: Phone persistence (one-to-many from users)
"""

from uuid import UUID

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from userdir.boundary.db.base import Base, UUIDMixin, TimestampMixin


class PhoneModel(Base, UUIDMixin, TimestampMixin):
    """
    Phone row owned by exactly one user.

    Deleting the user deletes its phones (ON DELETE CASCADE).
    """

    __tablename__ = "phones"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="Owning user ID",
    )
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    number: Mapped[str] = mapped_column(String(32), nullable=False)
    country_code: Mapped[str | None] = mapped_column(String(8), nullable=True, default=None)
