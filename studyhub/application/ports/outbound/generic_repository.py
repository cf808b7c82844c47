# studyhub/application/ports/outbound/generic_repository.py

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional, Any, Dict

T = TypeVar("T")


class IRepository(Generic[T], ABC):
    """Generic repository interface."""

    @abstractmethod
    async def get(self, id: Any) -> Optional[T]:
        pass

    @abstractmethod
    async def create(self, data: Dict[str, Any]) -> T:
        pass

    @abstractmethod
    async def update(self, entity: T, data: Dict[str, Any]) -> T:
        pass
