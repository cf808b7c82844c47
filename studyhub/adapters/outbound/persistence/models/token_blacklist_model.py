# studyhub/adapters/outbound/persistence/models/token_blacklist_model.py

"""
Modelo para blacklist de tokens.

Este módulo define o modelo usado para armazenar access tokens revogados
(logout) até a sua expiração natural.
"""

from sqlalchemy import Column, Integer, Text, DateTime
from studyhub.adapters.outbound.persistence.models.base_model import Base


class TokenBlacklist(Base):
    """
    Modelo para armazenar tokens revogados.

    Attributes:
        token: O access token assinado, literal
        expires_at: Data e hora de expiração do token
        created_at: Data e hora em que o token foi revogado
    """
    __tablename__ = "blacklisted_tokens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    token = Column(Text, unique=True, nullable=False)
    expires_at = Column(DateTime(timezone=False), nullable=False, index=True)  # explicitamente timezone=False
    created_at = Column(DateTime(timezone=False), nullable=True)
