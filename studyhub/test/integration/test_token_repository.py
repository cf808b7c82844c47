# studyhub/test/integration/test_token_repository.py

# Para rodar o script
# pytest studyhub/test/integration/test_token_repository.py -v

from datetime import timedelta

import pytest
from sqlalchemy import func, select

from studyhub.adapters.outbound.persistence.models import RefreshToken, TokenBlacklist
from studyhub.adapters.outbound.persistence.repositories.token_repository import AsyncTokenRepository
from studyhub.adapters.outbound.persistence.repositories.user_repository import AsyncUserRepository
from studyhub.adapters.outbound.security.jwt_config import JWTConfig
from studyhub.adapters.outbound.security.token_manager import JWTTokenManager
from studyhub.shared.utils.datetime_utils import DateTimeUtil
from studyhub.test.utils.fakes import make_user

HASH = "ab" * 64 + "." + "cd" * 16


async def _create_user(db_session, email="ada@example.com"):
    return await AsyncUserRepository(db_session).create({
        "name": "Ada Lovelace",
        "email": email,
        "password": HASH,
        "role": "student",
    })


async def _count(db_session, model) -> int:
    return (await db_session.execute(select(func.count()).select_from(model))).scalar_one()


@pytest.mark.asyncio
async def test_refresh_record_lifecycle(db_session):
    user = await _create_user(db_session)
    repo = AsyncTokenRepository(db_session)
    expires = DateTimeUtil.for_storage(DateTimeUtil.utcnow() + timedelta(days=7))

    await repo.create_refresh_token(user.id, "token-1", expires)
    record = await repo.get_refresh_token("token-1", user.id)

    assert record.expires_at == expires
    assert await repo.get_refresh_token("token-1", "someone-else") is None

    # Remoção concorrente: só a primeira retorna True
    assert await repo.delete_refresh_token("token-1", user.id) is True
    assert await repo.delete_refresh_token("token-1", user.id) is False


@pytest.mark.asyncio
async def test_delete_user_refresh_tokens(db_session):
    ada = await _create_user(db_session)
    grace = await _create_user(db_session, email="grace@example.com")
    repo = AsyncTokenRepository(db_session)
    expires = DateTimeUtil.utcnow_naive() + timedelta(days=7)

    await repo.create_refresh_token(ada.id, "a1", expires)
    await repo.create_refresh_token(ada.id, "a2", expires)
    await repo.create_refresh_token(grace.id, "g1", expires)

    assert await repo.delete_user_refresh_tokens(ada.id) == 2
    assert await _count(db_session, RefreshToken) == 1


@pytest.mark.asyncio
async def test_blacklist_insert_is_idempotent(db_session):
    repo = AsyncTokenRepository(db_session)
    expires = DateTimeUtil.utcnow_naive() + timedelta(minutes=15)

    await repo.add_to_blacklist("literal-token", expires)
    await repo.add_to_blacklist("literal-token", expires)

    assert await repo.is_blacklisted("literal-token")
    assert not await repo.is_blacklisted("other-token")
    assert await _count(db_session, TokenBlacklist) == 1


@pytest.mark.asyncio
async def test_cleanup_expired(db_session):
    user = await _create_user(db_session)
    repo = AsyncTokenRepository(db_session)
    past = DateTimeUtil.utcnow_naive() - timedelta(minutes=1)
    future = DateTimeUtil.utcnow_naive() + timedelta(minutes=15)

    await repo.create_refresh_token(user.id, "dead", past)
    await repo.create_refresh_token(user.id, "live", future)
    await repo.add_to_blacklist("dead-token", past)
    await repo.add_to_blacklist("live-token", future)

    assert await repo.cleanup_expired() == (1, 1)
    assert await repo.cleanup_expired() == (0, 0)
    assert await repo.get_refresh_token("live", user.id) is not None
    assert await repo.is_blacklisted("live-token")


@pytest.mark.asyncio
async def test_token_manager_against_the_database(db_session):
    """
    Fluxo completo do gerenciador de tokens com o repositório SQLAlchemy.
    """
    user = await _create_user(db_session)
    manager = JWTTokenManager(
        JWTConfig(access_secret="db-access-secret", refresh_secret="db-refresh-secret"),
        AsyncTokenRepository(db_session),
    )

    refresh_token, token_id = await manager.create_refresh_token(user.id)
    assert (await manager.verify_refresh_token(refresh_token))["tokenId"] == token_id

    access_token = manager.create_access_token(make_user(id=user.id))
    await manager.blacklist_token(access_token)
    await manager.blacklist_token(access_token)
    assert await manager.is_blacklisted(access_token)

    assert await manager.revoke_all_refresh_tokens(user.id) == 1
    assert await manager.verify_refresh_token(refresh_token) is None
