# studyhub/application/ports/inbound/__init__.py

from .auth_port import IAuthUseCase

__all__ = [
    "IAuthUseCase",
]
