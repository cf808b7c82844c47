# studyhub/domain/exceptions.py

"""
Domain exceptions.

Every exception carries an HTTP status, a machine-readable internal code
and a message that is safe to show to the caller. Authentication failures
never say which part of the credential was wrong.
"""

from typing import Any, Optional


class DomainException(Exception):
    """Base class for all errors raised by the application layer."""

    status_code: int = 400
    internal_code: str = "DOMAIN_ERROR"
    default_message: str = "Request could not be processed."

    def __init__(
            self,
            message: Optional[str] = None,
            *,
            status_code: Optional[int] = None,
            internal_code: Optional[str] = None,
            details: Any = None,
    ):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        if internal_code is not None:
            self.internal_code = internal_code
        self.details = details
        super().__init__(self.message)


class ValidationException(DomainException):
    """Malformed or weak input; details hold a list of {field, message}."""

    status_code = 400
    internal_code = "VALIDATION_ERROR"
    default_message = "Validation failed."


class WeakPasswordException(ValidationException):
    internal_code = "WEAK_PASSWORD"
    default_message = "Password is too weak."


class InvalidCredentialsException(DomainException):
    status_code = 401
    internal_code = "INVALID_CREDENTIALS"
    default_message = "Invalid credentials."


class TokenException(DomainException):
    """
    Missing, invalid, expired or revoked token, or a token whose user is gone.

    Attributes:
        clear_cookies: the response must tell the client to drop its stored tokens
    """

    status_code = 401
    internal_code = "TOKEN_INVALID"
    default_message = "Invalid or expired token."

    MESSAGES = {
        "TOKEN_MISSING": "Access token is required.",
        "TOKEN_REVOKED": "Token has been revoked.",
        "TOKEN_INVALID": "Invalid or expired token.",
        "REFRESH_TOKEN_MISSING": "Refresh token is required.",
        "REFRESH_TOKEN_INVALID": "Invalid or expired refresh token.",
        "USER_NOT_FOUND": "User not found.",
    }

    def __init__(self, code: str = "TOKEN_INVALID", *, clear_cookies: bool = False):
        super().__init__(self.MESSAGES.get(code, self.default_message), internal_code=code)
        self.clear_cookies = clear_cookies


class ResourceAlreadyExistsException(DomainException):
    status_code = 409
    internal_code = "ALREADY_EXISTS"
    default_message = "Resource already exists."

    def __init__(self, detail: Optional[str] = None, **kwargs):
        super().__init__(detail, **kwargs)


class DatabaseOperationException(DomainException):
    """Store failure. The original error is kept for logs and never sent to clients."""

    status_code = 500
    internal_code = "DATABASE_ERROR"
    default_message = "Internal server error."

    def __init__(self, message: Optional[str] = None, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.original_error = original_error
