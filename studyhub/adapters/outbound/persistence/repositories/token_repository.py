# studyhub/adapters/outbound/persistence/repositories/token_repository.py (async version)

from datetime import datetime
from typing import Optional, Tuple

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
import logging

from studyhub.adapters.outbound.persistence.models import RefreshToken, TokenBlacklist
from studyhub.application.ports.outbound.token_store_port import ITokenStore
from studyhub.domain.exceptions import DatabaseOperationException
from studyhub.shared.utils.datetime_utils import DateTimeUtil

logger = logging.getLogger(__name__)


class AsyncTokenRepository(ITokenStore):
    """Repository for refresh-token records and the access-token blacklist."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ———— REFRESH TOKENS ————

    async def create_refresh_token(self, user_id: str, token_id: str, expires_at: datetime) -> RefreshToken:
        """
        Persist a refresh-token record.

        Args:
            user_id: Owner of the token
            token_id: Random tokenId carried in the JWT
            expires_at: Naive UTC expiry

        Returns:
            The created RefreshToken record
        """
        try:
            record = RefreshToken(user_id=user_id, token=token_id, expires_at=expires_at)
            self.db.add(record)
            await self.db.commit()
            await self.db.refresh(record)
            return record
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DatabaseOperationException(
                message="Error storing refresh token",
                original_error=e
            )

    async def get_refresh_token(self, token_id: str, user_id: str) -> Optional[RefreshToken]:
        try:
            query = select(RefreshToken).where(
                RefreshToken.token == token_id,
                RefreshToken.user_id == user_id,
            )
            result = await self.db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise DatabaseOperationException(
                message="Error fetching refresh token",
                original_error=e
            )

    async def delete_refresh_token(self, token_id: str, user_id: str) -> bool:
        """
        Delete one record.

        Returns:
            True when a row was removed. Two concurrent rotations of the same
            token see True exactly once.
        """
        try:
            result = await self.db.execute(
                delete(RefreshToken).where(
                    RefreshToken.token == token_id,
                    RefreshToken.user_id == user_id,
                )
            )
            await self.db.commit()
            return result.rowcount > 0
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DatabaseOperationException(
                message="Error revoking refresh token",
                original_error=e
            )

    async def delete_user_refresh_tokens(self, user_id: str) -> int:
        try:
            result = await self.db.execute(delete(RefreshToken).where(RefreshToken.user_id == user_id))
            await self.db.commit()
            return result.rowcount or 0
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DatabaseOperationException(
                message="Error revoking user refresh tokens",
                original_error=e
            )

    # ———— BLACKLIST ————

    async def add_to_blacklist(self, token: str, expires_at: datetime) -> None:
        """
        Add an access token to the blacklist.

        A concurrent insert of the same token is treated as success.
        """
        try:
            self.db.add(TokenBlacklist(token=token, expires_at=expires_at))
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.debug("Token already blacklisted")
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DatabaseOperationException(
                message="Error adding token to blacklist",
                original_error=e
            )

    async def is_blacklisted(self, token: str) -> bool:
        """
        Check if a token is in the blacklist.

        Args:
            token: The literal access token

        Returns:
            True if token is blacklisted, False otherwise
        """
        try:
            query = select(TokenBlacklist.id).where(TokenBlacklist.token == token).limit(1)
            result = await self.db.execute(query)
            return result.scalar_one_or_none() is not None
        except SQLAlchemyError as e:
            raise DatabaseOperationException(
                message="Error checking token blacklist",
                original_error=e
            )

    # ———— SWEEP ————

    async def cleanup_expired(self) -> Tuple[int, int]:
        """
        Remove expired refresh records and blacklist entries.

        Returns:
            (refresh records deleted, blacklist entries deleted)
        """
        try:
            now = DateTimeUtil.utcnow_naive()
            refresh_result = await self.db.execute(delete(RefreshToken).where(RefreshToken.expires_at < now))
            blacklist_result = await self.db.execute(delete(TokenBlacklist).where(TokenBlacklist.expires_at < now))
            await self.db.commit()
            return refresh_result.rowcount or 0, blacklist_result.rowcount or 0
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DatabaseOperationException(
                message="Error cleaning up expired tokens",
                original_error=e
            )
