# studyhub/test/conftest.py

import os

# Configuração de ambiente antes de importar a aplicação
os.environ["ENVIRONMENT"] = "testing"
os.environ["ACCESS_TOKEN_SECRET"] = "test-access-secret-0123456789abcdef"
os.environ["REFRESH_TOKEN_SECRET"] = "test-refresh-secret-fedcba9876543210"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["TOKEN_CLEANUP_INTERVAL_MINUTES"] = "0"
# Custo menor do scrypt só para acelerar os testes
os.environ["SCRYPT_N"] = "1024"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from studyhub.main import app
from studyhub.adapters.outbound.persistence.database import get_db
from studyhub.adapters.outbound.persistence.models import Base
from studyhub.adapters.outbound.security.jwt_config import JWTConfig
from studyhub.adapters.outbound.security.token_manager import JWTTokenManager
from studyhub.application.use_cases.auth_use_cases import AsyncAuthService
from studyhub.test.utils.fakes import TEST_PASSWORD, FakeTokenStore, FakeUserRepository, PlainTextHasher


@pytest_asyncio.fixture
async def db_engine():
    """Banco SQLite em memória, recriado a cada teste."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def async_client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def jwt_config() -> JWTConfig:
    return JWTConfig(access_secret="unit-access-secret", refresh_secret="unit-refresh-secret")


@pytest.fixture
def token_store() -> FakeTokenStore:
    return FakeTokenStore()


@pytest.fixture
def token_manager(jwt_config, token_store) -> JWTTokenManager:
    return JWTTokenManager(jwt_config, token_store)


@pytest.fixture
def user_repository() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def auth_service(user_repository, token_manager) -> AsyncAuthService:
    return AsyncAuthService(user_repository, token_manager, PlainTextHasher())


@pytest_asyncio.fixture
async def registered_user(async_client: AsyncClient):
    """
    Registra um usuário pela API e retorna (payload de registro, corpo da resposta).
    """
    payload = {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "password": TEST_PASSWORD,
        "confirmPassword": TEST_PASSWORD,
    }
    response = await async_client.post("/api/v1/auth/register", json=payload)
    assert response.status_code == 201, f"Erro ao registrar usuário: {response.text}"

    # Os testes enviam tokens explicitamente
    async_client.cookies.clear()
    return payload, response.json()
