# studyhub/application/dtos/user_dto.py

"""
Schemas for user data.

This module defines DTOs (Data Transfer Objects) for validating and
serializing data related to users, registration, login, token refresh
and password strength checks.

Request schemas only check types here. The credential policy (password
rules, email and name shape, confirmation) is applied by InputValidator in
the use case so every failure is reported in one response with its field.
"""

from datetime import datetime
from typing import Optional, List
from studyhub.application.dtos.base_dto import CustomBaseModel
from pydantic import Field


class UserRegister(CustomBaseModel):
    """
    Schema for creating a new account.

    `confirmPassword` is accepted under its camelCase name as sent by the
    web client.
    """
    name: str = Field("", description="Display name (2-50 letters, spaces, hyphens or apostrophes).")
    email: str = Field("", description="Email of the user. Must be valid and unique.")
    password: str = Field("", description="Password meeting the password policy.")
    confirm_password: str = Field("", alias="confirmPassword", description="Must equal password.")

    def to_validation_dict(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "password": self.password,
            "confirmPassword": self.confirm_password,
        }


class UserLogin(CustomBaseModel):
    """
    Schema for user login.

    Used for user authentication via email and password.
    """

    email: str = Field("", description="Email of the user. Must be a valid and registered email.")
    password: str = Field("", description="User's password used for authentication.")


class UserOutput(CustomBaseModel):
    """
    Schema for returning user data.

    Used to return user data in APIs without exposing the credential.
    """
    id: str = Field(..., description="User's unique identifier.")
    name: str = Field(..., description="Display name.")
    email: str = Field(..., description="Email of the user.")
    role: str = Field(..., description="student or teacher.")
    university: Optional[str] = None
    program: Optional[str] = None
    year: Optional[str] = None
    avatar_url: Optional[str] = None
    interests: List[str] = Field(default_factory=list)
    profile_completion: int = 0
    created_at: Optional[datetime] = Field(None, description="User creation date and time.")
    updated_at: Optional[datetime] = Field(None, description="Date and time of the last update.")


class TokenData(CustomBaseModel):
    """Token pair issued on register, login and refresh."""
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_at: datetime = Field(..., description="Expiry of the access token (UTC).")


class AuthResponse(TokenData):
    """Body of register, login and refresh responses."""
    user: UserOutput
    message: str


class RefreshTokenRequest(CustomBaseModel):
    """Optional body of /auth/refresh; the refresh cookie is used when absent."""
    refresh_token: Optional[str] = Field(None, description="Refresh token issued at login.")


class MessageOutput(CustomBaseModel):
    message: str


class PasswordStrengthRequest(CustomBaseModel):
    password: Optional[str] = None


class PasswordStrengthOutput(CustomBaseModel):
    score: int = Field(..., description="0 to 9 points.")
    strength: str = Field(..., description="very-weak, weak, fair, good or strong.")
    feedback: List[str] = Field(default_factory=list)


class SessionOutput(CustomBaseModel):
    authenticated: bool
    user: Optional[UserOutput] = None
