# studyhub/adapters/outbound/security/jwt_config.py

"""Configuração de JWT para access e refresh tokens."""

from dataclasses import dataclass
from datetime import timedelta

from studyhub.adapters.configuration.config import Settings, settings as default_settings


@dataclass(frozen=True)
class JWTConfig:
    """
    Signing configuration handed to the token manager.

    Access and refresh tokens use separate secrets so that one kind can never
    be verified as the other.
    """

    access_secret: str
    refresh_secret: str
    algorithm: str = "HS256"
    access_token_expires: timedelta = timedelta(minutes=15)
    refresh_token_expires: timedelta = timedelta(days=7)

    def __post_init__(self):
        if not self.access_secret or not self.refresh_secret:
            raise ValueError("JWT secrets must not be empty.")
        if self.access_secret == self.refresh_secret:
            raise ValueError("Access and refresh secrets must be different.")

    @classmethod
    def from_settings(cls, settings: Settings = default_settings) -> "JWTConfig":
        return cls(
            access_secret=settings.ACCESS_TOKEN_SECRET.get_secret_value(),
            refresh_secret=settings.REFRESH_TOKEN_SECRET.get_secret_value(),
            algorithm=settings.ALGORITHM,
            access_token_expires=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            refresh_token_expires=timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS),
        )
