# studyhub/adapters/outbound/persistence/models/user_model.py

"""
Modelo de usuário.

Only the fields the authentication flows read or write are modelled; the
academic profile columns are kept so registration can create a complete row.
"""
import uuid

from sqlalchemy import Column, String, Integer, DateTime, JSON
from sqlalchemy.orm import relationship

from studyhub.adapters.outbound.persistence.models.base_model import Base

ROLE_STUDENT = "student"
ROLE_TEACHER = "teacher"


class User(Base):
    """
    Modelo de usuário do sistema.

    Attributes:
        id: Identificador único do usuário (UUID em texto)
        name: Nome de exibição
        email: Email do usuário (utilizado para login, único)
        password: Credencial scrypt (nunca serializada)
        role: "student" ou "teacher"
        university, program, year, avatar_url, interests: perfil acadêmico
        profile_completion: percentual de preenchimento do perfil
        created_at: Data e hora de criação
        updated_at: Data e hora da última atualização
    """
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False)
    email = Column(String(254), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=ROLE_STUDENT)
    university = Column(String(255), nullable=True)
    program = Column(String(255), nullable=True)
    year = Column(String(50), nullable=True)
    avatar_url = Column(String(500), nullable=True)
    interests = Column(JSON, nullable=False, default=list)
    profile_completion = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=False), nullable=True)
    updated_at = Column(DateTime(timezone=False), nullable=True)

    refresh_tokens = relationship(
        "RefreshToken",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="noload",
    )

    def __repr__(self) -> str:
        """Representação em string do objeto User."""
        return f"<User(email={self.email}, role={self.role})>"
