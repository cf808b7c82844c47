# studyhub/application/ports/outbound/token_store_port.py

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional, Tuple


class ITokenStore(ABC):
    """
    Persistence of refresh-token records and blacklisted access tokens.

    Datetimes are naive UTC.
    """

    @abstractmethod
    async def create_refresh_token(self, user_id: str, token_id: str, expires_at: datetime) -> Any:
        pass

    @abstractmethod
    async def get_refresh_token(self, token_id: str, user_id: str) -> Optional[Any]:
        pass

    @abstractmethod
    async def delete_refresh_token(self, token_id: str, user_id: str) -> bool:
        pass

    @abstractmethod
    async def delete_user_refresh_tokens(self, user_id: str) -> int:
        pass

    @abstractmethod
    async def add_to_blacklist(self, token: str, expires_at: datetime) -> None:
        pass

    @abstractmethod
    async def is_blacklisted(self, token: str) -> bool:
        pass

    @abstractmethod
    async def cleanup_expired(self) -> Tuple[int, int]:
        pass
