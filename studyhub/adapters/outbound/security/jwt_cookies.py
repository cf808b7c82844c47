# studyhub/adapters/outbound/security/jwt_cookies.py

"""
Gerenciamento dos cookies de autenticação.

Access and refresh tokens are also delivered as HttpOnly cookies. The
refresh cookie is scoped to the auth routes so it is not sent with every
API call.
"""

from typing import Optional
from fastapi import Response, Request
import logging

from studyhub.adapters.configuration.config import Settings, settings as default_settings

# Configurar logger
logger = logging.getLogger(__name__)


class JWTCookieManager:
    """
    Sets, reads and clears the auth cookies.

    Secure is only enabled in production so the cookies work over plain
    HTTP during development and tests.
    """

    def __init__(self, settings: Settings = default_settings):
        self.access_cookie_name = settings.ACCESS_TOKEN_COOKIE_NAME
        self.refresh_cookie_name = settings.REFRESH_TOKEN_COOKIE_NAME
        self.cookie_domain = settings.COOKIE_DOMAIN
        self.cookie_path = settings.COOKIE_PATH
        self.refresh_cookie_path = settings.REFRESH_TOKEN_COOKIE_PATH
        self.cookie_samesite = settings.COOKIE_SAMESITE
        self.secure = settings.is_production
        self.access_max_age = settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
        self.refresh_max_age = settings.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60

    def set_access_token_cookie(self, response: Response, token: str):
        response.set_cookie(
            key=self.access_cookie_name,
            value=token,
            max_age=self.access_max_age,
            path=self.cookie_path,
            domain=self.cookie_domain,
            secure=self.secure,
            httponly=True,  # Protege contra XSS
            samesite=self.cookie_samesite
        )

    def set_refresh_token_cookie(self, response: Response, token: str):
        # Cookie de refresh - restrito às rotas de autenticação
        response.set_cookie(
            key=self.refresh_cookie_name,
            value=token,
            max_age=self.refresh_max_age,
            path=self.refresh_cookie_path,
            domain=self.cookie_domain,
            secure=self.secure,
            httponly=True,
            samesite=self.cookie_samesite
        )

    def set_auth_cookies(self, response: Response, access_token: str, refresh_token: str):
        self.set_access_token_cookie(response, access_token)
        self.set_refresh_token_cookie(response, refresh_token)

    def unset_jwt_cookies(self, response: Response):
        """
        Remove todos os cookies relacionados a JWT.

        Args:
            response: Objeto Response do FastAPI
        """
        response.delete_cookie(
            key=self.access_cookie_name,
            path=self.cookie_path,
            domain=self.cookie_domain,
        )

        # Mesmo caminho usado ao definir
        response.delete_cookie(
            key=self.refresh_cookie_name,
            path=self.refresh_cookie_path,
            domain=self.cookie_domain,
        )

    def get_access_token_from_cookie(self, request: Request) -> Optional[str]:
        return request.cookies.get(self.access_cookie_name) or None

    def get_refresh_token_from_cookie(self, request: Request) -> Optional[str]:
        return request.cookies.get(self.refresh_cookie_name) or None


# Instância pública
cookie_manager = JWTCookieManager()
