# studyhub/adapters/outbound/security/password_hasher.py

"""
Salted scrypt password hashing.

Stored credential format: ``hex(derived_key) + "." + salt_hex``. The salt is
16 random bytes and its 32-character hex text is what scrypt receives as the
salt, so credentials written by the previous Node service keep verifying.
"""

import hashlib
import hmac
import logging
import re
import secrets
from typing import Optional

from starlette.concurrency import run_in_threadpool

from studyhub.adapters.configuration.config import settings
from studyhub.application.ports.outbound.password_hasher_port import IPasswordHasher

logger = logging.getLogger(__name__)

SALT_BYTES = 16
KEY_LENGTH = 64
SEPARATOR = "."

# 128 hex chars (64-byte key) + "." + 32 hex chars (16-byte salt)
HASH_PATTERN = re.compile(r"^[0-9a-f]{%d}\.[0-9a-f]{%d}$" % (KEY_LENGTH * 2, SALT_BYTES * 2))


class ScryptPasswordHasher(IPasswordHasher):
    """
    Password hasher backed by hashlib.scrypt.

    The async methods push the key derivation to Starlette's threadpool so
    the event loop is not blocked; the sync variants are used by ORM hooks.
    """

    def __init__(self, n: Optional[int] = None, r: Optional[int] = None, p: Optional[int] = None):
        self.n = n or settings.SCRYPT_N
        self.r = r or settings.SCRYPT_R
        self.p = p or settings.SCRYPT_P
        # scrypt needs 128 * n * r bytes; leave headroom over the OpenSSL default
        self.maxmem = 256 * self.n * self.r

    def _derive(self, password: str, salt_hex: str) -> bytes:
        return hashlib.scrypt(
            password.encode("utf-8"),
            salt=salt_hex.encode("utf-8"),
            n=self.n,
            r=self.r,
            p=self.p,
            maxmem=self.maxmem,
            dklen=KEY_LENGTH,
        )

    # ———— HASH ————

    def hash_password_sync(self, password: str) -> str:
        salt_hex = secrets.token_bytes(SALT_BYTES).hex()
        derived = self._derive(password, salt_hex)
        return f"{derived.hex()}{SEPARATOR}{salt_hex}"

    async def hash_password(self, password: str) -> str:
        """Asynchronously hash a password."""
        return await run_in_threadpool(self.hash_password_sync, password)

    # ———— VERIFY ————

    def verify_password_sync(self, password: str, stored: str) -> bool:
        """
        Check a supplied password against a stored credential.

        Returns False for any malformed stored value instead of raising.
        """
        if not stored or not isinstance(stored, str) or password is None:
            return False

        parts = stored.split(SEPARATOR)
        if len(parts) != 2 or not parts[0] or not parts[1]:
            return False

        key_hex, salt_hex = parts
        try:
            expected = bytes.fromhex(key_hex)
            bytes.fromhex(salt_hex)
        except ValueError:
            return False

        if len(expected) != KEY_LENGTH:
            return False

        try:
            supplied = self._derive(password, salt_hex)
        except (ValueError, MemoryError) as e:
            logger.warning(f"scrypt derivation failed: {e}")
            return False

        return hmac.compare_digest(supplied, expected)

    async def verify_password(self, password: str, stored: str) -> bool:
        """Verify a plain password against a stored credential."""
        return await run_in_threadpool(self.verify_password_sync, password, stored)

    @staticmethod
    def is_hashed(value: Optional[str]) -> bool:
        """True when the value already has the stored credential format."""
        return bool(value) and HASH_PATTERN.match(value) is not None


# Instância pública
password_hasher = ScryptPasswordHasher()
