# studyhub/application/ports/inbound/auth_port.py

from abc import ABC, abstractmethod
from typing import Any, Optional

from studyhub.application.dtos.user_dto import AuthResponse, UserLogin, UserRegister
from studyhub.domain.models.password_strength import PasswordStrength


class IAuthUseCase(ABC):
    """Interface for authentication use cases."""

    @abstractmethod
    async def register_user(self, user_input: UserRegister) -> AuthResponse:
        pass

    @abstractmethod
    async def login_user(self, user_input: UserLogin) -> AuthResponse:
        pass

    @abstractmethod
    async def refresh_tokens(self, refresh_token: Optional[str]) -> AuthResponse:
        pass

    @abstractmethod
    async def logout(self, access_token: Optional[str], refresh_token: Optional[str]) -> None:
        pass

    @abstractmethod
    async def logout_all(self, user: Any) -> int:
        pass

    @abstractmethod
    async def authenticate_request(self, token: Optional[str]) -> Any:
        pass

    @abstractmethod
    async def resolve_optional_user(self, token: Optional[str]) -> Optional[Any]:
        pass

    @abstractmethod
    def check_password_strength(self, password: Optional[str]) -> PasswordStrength:
        pass
