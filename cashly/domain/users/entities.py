# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass


def normalize_username(username: str) -> str:
    """Lookup key under which usernames differing only in case are equal."""
    return username.casefold()


@dataclass(slots=True, frozen=True)
class PasswordDigest:
    """HMAC-SHA512 digest of a password together with the key it was computed under."""

    hash: bytes
    salt: bytes


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: bytes
    password_salt: bytes

    def with_password(self, digest: PasswordDigest) -> User:
        return User(
            id=self.id,
            username=self.username,
            password_hash=digest.hash,
            password_salt=digest.salt,
        )

    def with_username(self, username: str) -> User:
        return User(
            id=self.id,
            username=username,
            password_hash=self.password_hash,
            password_salt=self.password_salt,
        )
