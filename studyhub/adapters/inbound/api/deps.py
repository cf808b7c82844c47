# studyhub/adapters/inbound/api/deps.py (async version)

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for database access, service wiring and authentication.
"""

import logging
from typing import Optional

from fastapi import Depends, Request, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.adapters.outbound.persistence.database import get_db
from studyhub.adapters.outbound.persistence.models import User
from studyhub.adapters.outbound.persistence.repositories.token_repository import AsyncTokenRepository
from studyhub.adapters.outbound.persistence.repositories.user_repository import AsyncUserRepository
from studyhub.adapters.outbound.security.jwt_config import JWTConfig
from studyhub.adapters.outbound.security.jwt_cookies import cookie_manager
from studyhub.adapters.outbound.security.password_hasher import password_hasher
from studyhub.adapters.outbound.security.token_manager import JWTTokenManager
from studyhub.application.use_cases.auth_use_cases import AsyncAuthService

# Configure logger
logger = logging.getLogger(__name__)

# Bearer scheme; missing headers are handled by the auth gate (cookie fallback)
bearer_scheme = HTTPBearer(auto_error=False)


########################################################################
# Database Session Management
########################################################################

# Aliases for get_db
get_session = get_db


########################################################################
# Service wiring
########################################################################

def get_jwt_config() -> JWTConfig:
    return JWTConfig.from_settings()


def get_token_service(
        db: AsyncSession = Depends(get_session),
        config: JWTConfig = Depends(get_jwt_config),
) -> JWTTokenManager:
    return JWTTokenManager(config, AsyncTokenRepository(db))


def get_auth_service(
        db: AsyncSession = Depends(get_session),
        token_service: JWTTokenManager = Depends(get_token_service),
) -> AsyncAuthService:
    return AsyncAuthService(AsyncUserRepository(db), token_service, password_hasher)


########################################################################
# User Token Authentication
########################################################################

def get_access_token(
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
) -> Optional[str]:
    """Access token from `Authorization: Bearer`, falling back to the access-token cookie."""
    if credentials and credentials.credentials:
        return credentials.credentials
    return cookie_manager.get_access_token_from_cookie(request)


async def get_current_user(
        request: Request,
        token: Optional[str] = Depends(get_access_token),
        service: AsyncAuthService = Depends(get_auth_service),
) -> User:
    """
    Get the current user from the token.

    Returns:
        Authenticated User object (also stored on request.state.user)

    Raises:
        TokenException: token missing, revoked or invalid, or user not found
    """
    user = await service.authenticate_request(token)
    request.state.user = user
    return user


async def get_optional_current_user(
        request: Request,
        token: Optional[str] = Depends(get_access_token),
        service: AsyncAuthService = Depends(get_auth_service),
) -> Optional[User]:
    """Like get_current_user, but anonymous requests get None instead of a 401."""
    user = await service.resolve_optional_user(token)
    request.state.user = user
    return user
