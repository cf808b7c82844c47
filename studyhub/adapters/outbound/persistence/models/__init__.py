# studyhub/adapters/outbound/persistence/models/__init__.py

from studyhub.adapters.outbound.persistence.models.base_model import Base
from studyhub.adapters.outbound.persistence.models.user_model import User
from studyhub.adapters.outbound.persistence.models.refresh_token_model import RefreshToken
from studyhub.adapters.outbound.persistence.models.token_blacklist_model import TokenBlacklist

__all__ = [
    "Base",
    "User",
    "RefreshToken",
    "TokenBlacklist",
]
