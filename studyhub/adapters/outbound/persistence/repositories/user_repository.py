# studyhub/adapters/outbound/persistence/repositories/user_repository.py

"""
Async repository for the User entity.

Implements IUserRepository on top of AsyncCRUDBase. Emails are stored and
looked up in their normalized (trimmed, lower-case) form.
"""

from typing import Optional, Dict, Any, Union

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from studyhub.adapters.outbound.persistence.models import User
from studyhub.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from studyhub.application.ports.outbound.user_repository_port import IUserRepository
from studyhub.domain.exceptions import (
    ResourceAlreadyExistsException,
    DatabaseOperationException,
)
from studyhub.shared.utils.input_validation import InputValidator
from studyhub.shared.utils.messages_utils import get_message


class AsyncUserRepository(AsyncCRUDBase[User], IUserRepository):
    """
    Concrete repository for User entity, fully async.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def get_by_email(self, email: str) -> Optional[User]:
        try:
            normalized = InputValidator.normalize_email(email)
            result = await self.db.execute(select(User).where(User.email == normalized))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Database error while fetching user by email: {e}")
            raise DatabaseOperationException("Error fetching user by email.", original_error=e)

    async def create(self, data: Union[BaseModel, Dict[str, Any]]) -> User:
        """
        Create a user. The password in `data` must already be hashed.

        Raises:
            ResourceAlreadyExistsException: email already registered (EMAIL_EXISTS)
        """
        user_data = self._as_dict(data)
        user_data["email"] = InputValidator.normalize_email(user_data.get("email", ""))

        try:
            return await super().create(user_data)
        except ResourceAlreadyExistsException:
            raise ResourceAlreadyExistsException(
                detail=get_message("email_already_registered"),
                internal_code="EMAIL_EXISTS",
            )
