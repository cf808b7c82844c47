# studyhub/application/ports/outbound/__init__.py

from .generic_repository import IRepository
from .user_repository_port import IUserRepository
from .token_store_port import ITokenStore
from .token_service_port import ITokenService
from .password_hasher_port import IPasswordHasher

__all__ = [
    "IRepository",
    "IUserRepository",
    "ITokenStore",
    "ITokenService",
    "IPasswordHasher",
]
