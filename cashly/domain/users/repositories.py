# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import PasswordDigest, User


class UserRepository(Protocol):
    """Username lookups are case-insensitive."""

    def find_by_id(self, user_id: int) -> User | None: ...
    def find_by_username(self, username: str) -> User | None: ...
    def exists(self, username: str) -> bool: ...
    def add(self, user: User) -> User: ...
    def save(self, user: User) -> User: ...
    def remove(self, user_id: int) -> None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> PasswordDigest: ...
    def verify(self, password: str, digest: PasswordDigest) -> bool: ...


class TokenIssuer(Protocol):
    def issue(self, user: User) -> str: ...
