# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Password hashing strategies."""

from __future__ import annotations

import hashlib
import hmac
import secrets

from cashly.domain.users.entities import PasswordDigest
from cashly.domain.users.repositories import PasswordHasher

# Same key size a fresh HMAC-SHA512 instance generates in the original server,
# so digests stored by it keep verifying.
SALT_BYTES = 128


class HmacSha512PasswordHasher(PasswordHasher):
    """Keyed HMAC-SHA512 where the random key doubles as the salt.

    There is no work factor here; the scheme is kept for compatibility with
    hashes already stored as ``(hash, salt)`` byte pairs.
    """

    def __init__(self, salt_bytes: int = SALT_BYTES) -> None:
        self._salt_bytes = salt_bytes

    def hash(self, password: str) -> PasswordDigest:
        salt = secrets.token_bytes(self._salt_bytes)
        return PasswordDigest(hash=self._digest(password, salt), salt=salt)

    def verify(self, password: str, digest: PasswordDigest) -> bool:
        computed = self._digest(password, digest.salt)
        return hmac.compare_digest(computed, digest.hash)

    @staticmethod
    def _digest(password: str, salt: bytes) -> bytes:
        return hmac.new(salt, password.encode("utf-8"), hashlib.sha512).digest()
