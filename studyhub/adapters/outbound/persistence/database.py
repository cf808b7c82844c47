# studyhub/adapters/outbound/persistence/database.py

"""
Async engine and session factory.

The engine is created on first use so importing the application never
opens a connection.
"""

import logging
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from studyhub.adapters.configuration.config import settings

logger = logging.getLogger(__name__)

_engine: Optional[AsyncEngine] = None
_async_session_local: Optional[async_sessionmaker[AsyncSession]] = None


def get_engine() -> AsyncEngine:
    global _engine
    if _engine is None:
        db_url = settings.DATABASE_URL

        if db_url.startswith("sqlite"):
            _engine = create_async_engine(
                db_url,
                echo=settings.DB_ECHO,
                connect_args={"check_same_thread": False},
                poolclass=NullPool,
            )
        else:
            _engine = create_async_engine(
                db_url,
                echo=settings.DB_ECHO,
                pool_pre_ping=True,
            )
        logger.info("Database engine created")
    return _engine


def get_session_local() -> async_sessionmaker[AsyncSession]:
    """Get or create the session factory."""
    global _async_session_local
    if _async_session_local is None:
        _async_session_local = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _async_session_local


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per request; roll back if the request failed."""
    async with get_session_local()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def create_tables() -> None:
    from studyhub.adapters.outbound.persistence.models import Base

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables verified")


async def dispose_engine() -> None:
    global _engine, _async_session_local
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _async_session_local = None
