# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth_service import AuthService
from .expense_service import ExpenseService
from .password_hashing import HmacSha512PasswordHasher
from .service_response import FailureCode, ServiceResponse
from .token_issuer import JwtTokenIssuer, TokenClaims

__all__ = [
    "AuthService",
    "ExpenseService",
    "FailureCode",
    "HmacSha512PasswordHasher",
    "JwtTokenIssuer",
    "ServiceResponse",
    "TokenClaims",
]
