# studyhub/adapters/outbound/persistence/models/refresh_token_model.py

"""
Modelo de refresh tokens.

Only the random tokenId is stored, never the signed token. A refresh token
stays valid while its row exists and has not expired.
"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from studyhub.adapters.outbound.persistence.models.base_model import Base


class RefreshToken(Base):
    """
    Attributes:
        user_id: Dono do token (remoção em cascata com o usuário)
        token: tokenId (64 caracteres hexadecimais)
        expires_at: Expiração (UTC sem timezone)
        created_at: Criação (UTC sem timezone)
    """
    __tablename__ = "refresh_tokens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    token = Column(String(128), unique=True, nullable=False)
    expires_at = Column(DateTime(timezone=False), nullable=False, index=True)
    created_at = Column(DateTime(timezone=False), nullable=True)

    user = relationship("User", back_populates="refresh_tokens")
