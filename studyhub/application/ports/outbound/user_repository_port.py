# studyhub/application/ports/outbound/user_repository_port.py

from abc import abstractmethod
from typing import Any, Optional

from studyhub.application.ports.outbound.generic_repository import IRepository


class IUserRepository(IRepository[Any]):
    """User repository interface."""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Any]:
        pass
