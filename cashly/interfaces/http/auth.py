# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import wraps
from typing import Protocol

import jwt
from flask import g, request

from cashly.application.services.token_issuer import TokenClaims
from cashly.shared.errors import UnauthorizedError
from cashly.shared.logging import logger


class TokenDecoder(Protocol):
    def decode(self, token: str) -> TokenClaims: ...


class BearerAuthenticated(Protocol):
    _tokens: TokenDecoder


def _bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        return auth[7:].strip()
    return ""


def auth_required(f):
    """Verify the bearer token on a controller method and expose its claims on ``g``."""

    @wraps(f)
    def inner(self: BearerAuthenticated, *a, **kw):
        token = _bearer_token()
        if not token:
            logger.warning(f"No Authorization header on {request.method} {request.path}")
            raise UnauthorizedError("missing_token")

        try:
            claims = self._tokens.decode(token)
        except jwt.ExpiredSignatureError:
            logger.warning(f"Auth failed (token expired) on {request.method} {request.path}")
            raise UnauthorizedError("token_expired") from None
        except jwt.InvalidTokenError as exc:
            logger.warning(
                f"Auth failed ({type(exc).__name__}) on {request.method} {request.path}"
            )
            raise UnauthorizedError("invalid_token") from None

        g.user_id = claims.user_id
        g.username = claims.username
        logger.debug(f"Auth OK: user={claims.user_id} {request.method} {request.path}")
        return f(self, *a, **kw)

    return inner


def current_user_id() -> int:
    return int(g.user_id)
