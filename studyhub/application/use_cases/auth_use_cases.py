# studyhub/application/use_cases/auth_use_cases.py

"""
Service for user authentication.

This module implements the business logic for authentication operations,
following Clean Architecture and Domain-Driven Design principles. It only
talks to ports: the user repository, the token service and the password
hasher are injected.
"""

import logging
from typing import Any, List, Optional

from studyhub.application.dtos.user_dto import (
    AuthResponse,
    UserLogin,
    UserOutput,
    UserRegister,
)
from studyhub.application.ports.inbound.auth_port import IAuthUseCase
from studyhub.application.ports.outbound.password_hasher_port import IPasswordHasher
from studyhub.application.ports.outbound.token_service_port import ITokenService
from studyhub.application.ports.outbound.user_repository_port import IUserRepository
from studyhub.domain.exceptions import (
    DomainException,
    InvalidCredentialsException,
    ResourceAlreadyExistsException,
    TokenException,
    ValidationException,
    WeakPasswordException,
)
from studyhub.domain.models.password_strength import PasswordStrength
from studyhub.domain.services.password_strength_service import PasswordStrengthService
from studyhub.shared.utils.datetime_utils import DateTimeUtil
from studyhub.shared.utils.input_validation import FieldError, InputValidator
from studyhub.shared.utils.messages_utils import get_message

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "student"


class AsyncAuthService(IAuthUseCase):
    """
    Application service for authentication-related operations.

    Responsibilities:
    - Register new users and log them in
    - Rotate refresh tokens
    - Revoke sessions (logout, logout from all devices)
    - Resolve the caller of a request from its access token
    """

    def __init__(
            self,
            user_repository: IUserRepository,
            token_service: ITokenService,
            password_hasher: IPasswordHasher,
    ):
        self.users = user_repository
        self.tokens = token_service
        self.hasher = password_hasher

    @staticmethod
    def _raise_if_invalid(errors: List[FieldError]) -> None:
        if errors:
            raise ValidationException(
                get_message("validation_failed"),
                details=[error.to_dict() for error in errors],
            )

    async def _issue_tokens(self, user: Any, message: str) -> AuthResponse:
        access_token = self.tokens.create_access_token(user)
        refresh_token, _ = await self.tokens.create_refresh_token(str(user.id))
        expires_at = DateTimeUtil.utcnow() + self.tokens.access_token_expires

        return AuthResponse(
            user=UserOutput.model_validate(user),
            message=message,
            access_token=access_token,
            refresh_token=refresh_token,
            expires_at=expires_at,
        )

    async def register_user(self, user_input: UserRegister) -> AuthResponse:
        """
        Register a new user and sign them in.

        Raises:
            ValidationException: Input failed the credential policy.
            ResourceAlreadyExistsException: Email already registered.
            WeakPasswordException: Password passed the policy but scores weak.
        """
        self._raise_if_invalid(InputValidator.validate_registration(user_input.to_validation_dict()))

        email = InputValidator.normalize_email(user_input.email)
        if await self.users.get_by_email(email):
            logger.warning("Registration failed - duplicate email")
            raise ResourceAlreadyExistsException(
                detail=get_message("email_already_registered"),
                internal_code="EMAIL_EXISTS",
            )

        analysis = PasswordStrengthService.calculate(user_input.password)
        if not analysis.is_acceptable:
            raise WeakPasswordException(
                get_message("password_too_weak"),
                details={"strength": analysis.strength, "feedback": analysis.feedback},
            )

        hashed_password = await self.hasher.hash_password(user_input.password)
        user = await self.users.create({
            "name": user_input.name,
            "email": email,
            "password": hashed_password,
            "role": DEFAULT_ROLE,
        })

        logger.info(f"User registered successfully: {user.id}")
        return await self._issue_tokens(user, "Account created successfully")

    async def login_user(self, user_input: UserLogin) -> AuthResponse:
        """
        Authenticate user and generate access and refresh tokens.

        Raises:
            ValidationException: Email or password missing/malformed.
            InvalidCredentialsException: Unknown email or wrong password
                (same message for both).
        """
        self._raise_if_invalid(InputValidator.validate_login(user_input.model_dump()))

        user = await self.users.get_by_email(user_input.email)
        if not user or not await self.hasher.verify_password(user_input.password, user.password):
            logger.warning("Authentication failed")
            raise InvalidCredentialsException(get_message("generic_invalid_credentials"))

        logger.info(f"User logged in successfully: {user.id}")
        return await self._issue_tokens(user, "Login successful")

    async def refresh_tokens(self, refresh_token: Optional[str]) -> AuthResponse:
        """
        Rotate a refresh token: the presented one is consumed and a new pair is issued.

        Raises:
            TokenException: missing, invalid, expired, already used, or user gone.
        """
        if not refresh_token:
            raise TokenException("REFRESH_TOKEN_MISSING")

        payload = await self.tokens.verify_refresh_token(refresh_token)
        if not payload:
            raise TokenException("REFRESH_TOKEN_INVALID", clear_cookies=True)

        user = await self.users.get(payload["userId"])
        if not user:
            logger.warning(f"User not found during refresh: {payload['userId']}")
            raise TokenException("USER_NOT_FOUND", clear_cookies=True)

        # Só uma rotação concorrente consegue remover o registro
        if not await self.tokens.revoke_refresh_token(payload["tokenId"], payload["userId"]):
            logger.warning(f"Refresh token already consumed for user: {user.id}")
            raise TokenException("REFRESH_TOKEN_INVALID", clear_cookies=True)

        logger.info(f"Token refreshed successfully for user: {user.id}")
        return await self._issue_tokens(user, "Tokens refreshed successfully")

    async def logout(self, access_token: Optional[str], refresh_token: Optional[str]) -> None:
        """Blacklist the access token and revoke the refresh token, whichever are valid."""
        if access_token:
            await self.tokens.blacklist_token(access_token)

        if refresh_token:
            payload = await self.tokens.verify_refresh_token(refresh_token)
            if payload:
                await self.tokens.revoke_refresh_token(payload["tokenId"], payload["userId"])

    async def logout_all(self, user: Any) -> int:
        return await self.tokens.revoke_all_refresh_tokens(str(user.id))

    async def authenticate_request(self, token: Optional[str]) -> Any:
        """
        Resolve the user behind an access token.

        Checks run in order: presence, blacklist, signature/expiry/type,
        user existence.

        Raises:
            TokenException: TOKEN_MISSING, TOKEN_REVOKED, TOKEN_INVALID or USER_NOT_FOUND.
        """
        if not token:
            raise TokenException("TOKEN_MISSING")

        if await self.tokens.is_blacklisted(token):
            raise TokenException("TOKEN_REVOKED")

        payload = self.tokens.verify_access_token(token)
        if not payload:
            raise TokenException("TOKEN_INVALID")

        user = await self.users.get(payload["userId"])
        if not user:
            raise TokenException("USER_NOT_FOUND")

        return user

    async def resolve_optional_user(self, token: Optional[str]) -> Optional[Any]:
        """Same as authenticate_request, but answers None instead of raising."""
        try:
            return await self.authenticate_request(token)
        except TokenException:
            return None
        except DomainException as e:
            logger.warning(f"Optional authentication skipped: {e.internal_code} ({e.message})")
            return None

    def check_password_strength(self, password: Optional[str]) -> PasswordStrength:
        if not password:
            raise ValidationException(
                get_message("password_empty"),
                details=[FieldError("password", get_message("password_empty")).to_dict()],
            )
        return PasswordStrengthService.calculate(password)
