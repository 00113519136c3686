"""
User CRUD operations.

Dependencies: sqlalchemy, userdir.boundary.db.models
System role: User persistence reads
"""

from userdir.boundary.db.models.user_model import UserModel
from userdir.boundary.db.CRUD.base_crud import BaseCRUD


class UserCRUD(BaseCRUD[UserModel]):
    """Read operations for UserModel."""

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)


user_crud = UserCRUD()
