# studyhub/test/integration/test_user_repository.py

# Para rodar o script
# pytest studyhub/test/integration/test_user_repository.py -v

import pytest

from studyhub.adapters.outbound.persistence.repositories.user_repository import AsyncUserRepository
from studyhub.domain.exceptions import ResourceAlreadyExistsException

HASH = "ab" * 64 + "." + "cd" * 16


@pytest.mark.asyncio
async def test_create_normalizes_email_and_fills_defaults(db_session):
    repo = AsyncUserRepository(db_session)

    user = await repo.create({"name": "Ada Lovelace", "email": "  Ada@Example.COM ", "password": HASH})

    assert user.email == "ada@example.com"
    assert user.role == "student"
    assert user.interests == []
    assert user.profile_completion == 0
    assert len(user.id) == 36
    assert user.created_at is not None

    assert (await repo.get_by_email("ADA@example.com")).id == user.id
    assert (await repo.get(user.id)).email == "ada@example.com"
    assert await repo.exists(email="ada@example.com")


@pytest.mark.asyncio
async def test_duplicate_email_maps_to_email_exists(db_session):
    repo = AsyncUserRepository(db_session)
    await repo.create({"name": "Ada Lovelace", "email": "ada@example.com", "password": HASH})

    with pytest.raises(ResourceAlreadyExistsException) as exc_info:
        await repo.create({"name": "Ada Again", "email": "ADA@example.com", "password": HASH})

    assert exc_info.value.internal_code == "EMAIL_EXISTS"


@pytest.mark.asyncio
async def test_update(db_session):
    repo = AsyncUserRepository(db_session)
    user = await repo.create({"name": "Ada Lovelace", "email": "ada@example.com", "password": HASH})

    updated = await repo.update(user, {"university": "University of London", "unknown_field": "x"})

    assert updated.university == "University of London"
    assert not hasattr(updated, "unknown_field")


@pytest.mark.asyncio
async def test_missing_user(db_session):
    repo = AsyncUserRepository(db_session)

    assert await repo.get("missing") is None
    assert await repo.get_by_email("nobody@example.com") is None
