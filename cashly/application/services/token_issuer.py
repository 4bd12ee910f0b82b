# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer token minting and verification."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from cashly.domain.users.entities import User
from cashly.domain.users.repositories import TokenIssuer

ALGORITHM = "HS512"
DEFAULT_LIFETIME = timedelta(days=1)

# Claim names the original ASP.NET server writes for NameIdentifier and Name.
CLAIM_USER_ID = "nameid"
CLAIM_USERNAME = "unique_name"


@dataclass(slots=True, frozen=True)
class TokenClaims:
    user_id: int
    username: str
    expires_at: datetime


class JwtTokenIssuer(TokenIssuer):
    def __init__(
        self,
        secret: str,
        *,
        lifetime: timedelta = DEFAULT_LIFETIME,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._key = secret.encode("utf-8")
        self._lifetime = lifetime
        self._clock = clock or (lambda: datetime.now(UTC))

    def issue(self, user: User) -> str:
        expires_at = self._clock() + self._lifetime
        claims: dict[str, Any] = {
            CLAIM_USER_ID: str(user.id),
            CLAIM_USERNAME: user.username,
            "exp": expires_at,
        }
        return jwt.encode(claims, self._key, algorithm=ALGORITHM)

    def decode(self, token: str) -> TokenClaims:
        """Verify signature and expiry.

        Raises ``jwt.InvalidTokenError`` (or a subclass) for anything that
        should be treated as unauthorized.
        """
        payload = jwt.decode(
            token,
            self._key,
            algorithms=[ALGORITHM],
            options={"require": ["exp", CLAIM_USER_ID, CLAIM_USERNAME]},
        )
        try:
            user_id = int(payload[CLAIM_USER_ID])
        except (TypeError, ValueError) as exc:
            raise jwt.InvalidTokenError("malformed user id claim") from exc
        return TokenClaims(
            user_id=user_id,
            username=str(payload[CLAIM_USERNAME]),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )
