# studyhub/application/ports/outbound/token_service_port.py

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Optional, Dict, Any, Tuple


class ITokenService(ABC):
    """Token handling interface."""

    @property
    @abstractmethod
    def access_token_expires(self) -> timedelta:
        pass

    @abstractmethod
    def create_access_token(self, user: Any) -> str:
        pass

    @abstractmethod
    async def create_refresh_token(self, user_id: str) -> Tuple[str, str]:
        pass

    @abstractmethod
    def verify_access_token(self, token: str) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    async def verify_refresh_token(self, token: str) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    async def is_blacklisted(self, token: str) -> bool:
        pass

    @abstractmethod
    async def blacklist_token(self, token: str) -> None:
        pass

    @abstractmethod
    async def revoke_refresh_token(self, token_id: str, user_id: str) -> bool:
        pass

    @abstractmethod
    async def revoke_all_refresh_tokens(self, user_id: str) -> int:
        pass

    @abstractmethod
    async def cleanup_expired_tokens(self) -> Tuple[int, int]:
        pass
