# studyhub/test/unit/test_password_protection_existing_hash.py

# Para rodar o script
# pytest studyhub/test/unit/test_password_protection_existing_hash.py

import pytest
from studyhub.shared.middleware.logging_middleware import PasswordProtectionMiddleware
from studyhub.adapters.outbound.security.password_hasher import password_hasher


class DummyUser:
    def __init__(self, password):
        self.password = password


@pytest.mark.asyncio
async def test_password_protection_does_not_rehash_existing_hash():
    """
    Garante que senhas já criptografadas não sejam re-hashadas novamente.
    """
    hashed_password = await password_hasher.hash_password("Str0ng!Pass9")
    user = DummyUser(password=hashed_password)

    PasswordProtectionMiddleware.before_insert_or_update(None, None, user)

    assert user.password == hashed_password, "Senha hashada foi alterada indevidamente!"


@pytest.mark.asyncio
async def test_password_protection_hashes_plain_text():
    """
    Senha em texto plano é convertida para o formato scrypt antes de salvar.
    """
    user = DummyUser(password="Str0ng!Pass9")

    PasswordProtectionMiddleware.before_insert_or_update(None, None, user)

    assert user.password != "Str0ng!Pass9"
    assert password_hasher.is_hashed(user.password)
    assert await password_hasher.verify_password("Str0ng!Pass9", user.password)


def test_password_protection_ignores_empty_password():
    user = DummyUser(password="")

    PasswordProtectionMiddleware.before_insert_or_update(None, None, user)

    assert user.password == ""
