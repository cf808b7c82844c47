# studyhub/application/ports/outbound/password_hasher_port.py

from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """Password hashing interface."""

    @abstractmethod
    async def hash_password(self, password: str) -> str:
        pass

    @abstractmethod
    async def verify_password(self, password: str, stored: str) -> bool:
        pass
