from __future__ import annotations

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="cashly-tests-")

os.environ.setdefault("TOKEN_SECRET", "x" * 64)
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_DB_DIR, 'cashly.db')}")
os.environ.setdefault("APP_ENV", "test")

import pytest  # noqa: E402

from cashly.application.services.token_issuer import JwtTokenIssuer  # noqa: E402
from cashly.tests.fakes import InMemoryExpenseRepository, InMemoryUserRepository  # noqa: E402


@pytest.fixture()
def token_secret() -> str:
    return os.environ["TOKEN_SECRET"]


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def expenses() -> InMemoryExpenseRepository:
    return InMemoryExpenseRepository()


@pytest.fixture()
def token_issuer(token_secret: str) -> JwtTokenIssuer:
    return JwtTokenIssuer(token_secret)
