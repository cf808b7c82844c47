# studyhub/domain/services/auth_service.py

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
import uuid

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"

ACCESS_REQUIRED_CLAIMS = ("userId", "email", "role", "type", "iat", "exp")
REFRESH_REQUIRED_CLAIMS = ("userId", "tokenId", "type", "iat", "exp")


class AuthService:
    """
    Domain service for authentication-related business logic.
    """

    @staticmethod
    def create_token_payload(
            user_id: str,
            expires_delta: timedelta,
            token_type: str,
            additional_claims: Optional[Dict[str, Any]] = None,
            now: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """
        Create a token payload with standard claims.

        Args:
            user_id: Identifier of the user the token is issued to
            expires_delta: Token lifetime
            token_type: "access" or "refresh"
            additional_claims: Extra claims (email/role, tokenId)
            now: Issue instant, defaults to the current UTC time

        Returns:
            Dict with all token claims
        """
        issued_at = now or datetime.now(timezone.utc)
        expire = issued_at + expires_delta

        payload = {
            "userId": str(user_id),
            "type": token_type,
            "iat": int(issued_at.timestamp()),
            "exp": int(expire.timestamp()),
        }

        if additional_claims:
            payload.update(additional_claims)

        return payload

    @staticmethod
    def create_access_payload(user_id: str, email: str, role: str, expires_delta: timedelta,
                              now: Optional[datetime] = None) -> Dict[str, Any]:
        return AuthService.create_token_payload(
            user_id,
            expires_delta,
            ACCESS_TOKEN_TYPE,
            {"email": email, "role": role, "jti": uuid.uuid4().hex},
            now=now,
        )

    @staticmethod
    def create_refresh_payload(user_id: str, token_id: str, expires_delta: timedelta,
                               now: Optional[datetime] = None) -> Dict[str, Any]:
        return AuthService.create_token_payload(
            user_id, expires_delta, REFRESH_TOKEN_TYPE, {"tokenId": token_id}, now=now
        )

    @staticmethod
    def is_token_valid(token_payload: Dict[str, Any], expected_type: str) -> bool:
        """
        Validate a decoded token's claims.

        Args:
            token_payload: The decoded token payload
            expected_type: Expected token type

        Returns:
            True if token is valid, False otherwise
        """
        required = ACCESS_REQUIRED_CLAIMS if expected_type == ACCESS_TOKEN_TYPE else REFRESH_REQUIRED_CLAIMS
        if not all(token_payload.get(k) for k in required):
            return False

        if token_payload.get("type") != expected_type:
            return False

        try:
            expires_at = datetime.fromtimestamp(int(token_payload["exp"]), tz=timezone.utc)
        except (TypeError, ValueError, OverflowError):
            return False

        return expires_at > datetime.now(timezone.utc)
