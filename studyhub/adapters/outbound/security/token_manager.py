# studyhub/adapters/outbound/security/token_manager.py

"""
JWT issue, verification and revocation.

Access tokens are stateless and checked against the blacklist by the auth
gate. Refresh tokens are only valid while their persisted record exists, so
deleting the record revokes them.
"""

import logging
import secrets
from datetime import timedelta
from typing import Any, Dict, Optional, Tuple

from jose import jwt, JWTError

from studyhub.adapters.outbound.security.jwt_config import JWTConfig
from studyhub.application.ports.outbound.token_service_port import ITokenService
from studyhub.application.ports.outbound.token_store_port import ITokenStore
from studyhub.domain.services.auth_service import (
    ACCESS_TOKEN_TYPE,
    REFRESH_TOKEN_TYPE,
    AuthService,
)
from studyhub.shared.utils.datetime_utils import DateTimeUtil

logger = logging.getLogger(__name__)

TOKEN_ID_BYTES = 32


class JWTTokenManager(ITokenService):
    """
    Token service bound to one signing configuration and one token store.

    Responsibilities:
    - Create access tokens and refresh tokens (with their stored record)
    - Verify both kinds without letting decode errors escape
    - Blacklist access tokens and revoke refresh records
    - Sweep expired rows
    """

    def __init__(self, config: JWTConfig, token_store: ITokenStore):
        self.config = config
        self.store = token_store

    @property
    def access_token_expires(self) -> timedelta:
        return self.config.access_token_expires

    # ———— ISSUE ————

    def create_access_token(self, user: Any) -> str:
        payload = AuthService.create_access_payload(
            user_id=str(user.id),
            email=user.email,
            role=user.role,
            expires_delta=self.config.access_token_expires,
        )
        token = jwt.encode(payload, self.config.access_secret, algorithm=self.config.algorithm)
        logger.debug(f"Access token created for user={user.id}")
        return token

    async def create_refresh_token(self, user_id: str) -> Tuple[str, str]:
        """
        Create a refresh token and persist its record.

        Returns:
            (signed token, tokenId)
        """
        now = DateTimeUtil.utcnow()
        token_id = secrets.token_hex(TOKEN_ID_BYTES)
        payload = AuthService.create_refresh_payload(
            user_id=str(user_id),
            token_id=token_id,
            expires_delta=self.config.refresh_token_expires,
            now=now,
        )
        token = jwt.encode(payload, self.config.refresh_secret, algorithm=self.config.algorithm)

        await self.store.create_refresh_token(
            user_id=str(user_id),
            token_id=token_id,
            expires_at=DateTimeUtil.for_storage(now + self.config.refresh_token_expires),
        )
        logger.debug(f"Refresh token created for user={user_id}")
        return token, token_id

    # ———— VERIFY ————

    def _decode(self, token: str, secret: str, expected_type: str) -> Optional[Dict[str, Any]]:
        if not token:
            return None
        try:
            payload = jwt.decode(token, secret, algorithms=[self.config.algorithm])
        except JWTError as e:
            logger.debug(f"Token rejected ({expected_type}): {e}")
            return None

        if not AuthService.is_token_valid(payload, expected_type):
            logger.debug(f"Token claims rejected ({expected_type})")
            return None
        return payload

    def verify_access_token(self, token: str) -> Optional[Dict[str, Any]]:
        """Signature, expiry and type only. Blacklist lookups are the caller's job."""
        return self._decode(token, self.config.access_secret, ACCESS_TOKEN_TYPE)

    async def verify_refresh_token(self, token: str) -> Optional[Dict[str, Any]]:
        payload = self._decode(token, self.config.refresh_secret, REFRESH_TOKEN_TYPE)
        if payload is None:
            return None

        record = await self.store.get_refresh_token(payload["tokenId"], payload["userId"])
        if record is None:
            logger.info(f"Refresh token without stored record for user={payload['userId']}")
            return None

        if DateTimeUtil.is_past(record.expires_at):
            return None

        return payload

    # ———— REVOKE ————

    async def is_blacklisted(self, token: str) -> bool:
        return await self.store.is_blacklisted(token)

    async def blacklist_token(self, token: str) -> None:
        """
        Blacklist an access token until its natural expiry.

        Tokens that do not decode (or are already expired) are ignored, and
        a token already on the list is left as is.
        """
        if not token:
            return
        try:
            payload = jwt.decode(token, self.config.access_secret, algorithms=[self.config.algorithm])
        except JWTError:
            return

        exp = payload.get("exp")
        if not isinstance(exp, (int, float)):
            return

        if await self.store.is_blacklisted(token):
            return

        await self.store.add_to_blacklist(token, DateTimeUtil.timestamp_for_storage(exp))
        logger.info(f"Access token blacklisted for user={payload.get('userId')}")

    async def revoke_refresh_token(self, token_id: str, user_id: str) -> bool:
        return await self.store.delete_refresh_token(token_id, str(user_id))

    async def revoke_all_refresh_tokens(self, user_id: str) -> int:
        count = await self.store.delete_user_refresh_tokens(str(user_id))
        logger.info(f"Revoked {count} refresh token(s) for user={user_id}")
        return count

    async def cleanup_expired_tokens(self) -> Tuple[int, int]:
        refresh_deleted, blacklist_deleted = await self.store.cleanup_expired()
        logger.info(
            f"Expired token sweep removed {refresh_deleted} refresh record(s) "
            f"and {blacklist_deleted} blacklisted token(s)"
        )
        return refresh_deleted, blacklist_deleted
