# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import PasswordDigest, User, normalize_username
from .repositories import PasswordHasher, TokenIssuer, UserRepository

__all__ = [
    "PasswordDigest",
    "PasswordHasher",
    "TokenIssuer",
    "User",
    "UserRepository",
    "normalize_username",
]
