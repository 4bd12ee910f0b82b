from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from cashly.application.services.auth_service import AuthService
from cashly.application.services.password_hashing import HmacSha512PasswordHasher
from cashly.application.services.service_response import FailureCode
from cashly.application.services.token_issuer import JwtTokenIssuer
from cashly.domain.users.entities import User
from cashly.infrastructure.db import ENGINE, Base
from cashly.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


@pytest.fixture()
def repository() -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository()


@pytest.fixture()
def service(repository: SqlAlchemyUserRepository, token_issuer: JwtTokenIssuer) -> AuthService:
    return AuthService(
        users=repository,
        password_hasher=HmacSha512PasswordHasher(),
        tokens=token_issuer,
    )


def _user(username: str) -> User:
    return User(id=0, username=username, password_hash=b"h" * 64, password_salt=b"s" * 128)


@pytest.mark.parametrize(
    ("stored", "lookup"),
    [("Alice", "aLICE"), ("Émile", "émile"), ("ÉMILE", "émile"), ("Straße", "STRASSE")],
)
def test_lookup_ignores_case_beyond_ascii(
    repository: SqlAlchemyUserRepository, stored: str, lookup: str
) -> None:
    created = repository.add(_user(stored))

    found = repository.find_by_username(lookup)

    assert found is not None
    assert found.id == created.id
    assert found.username == stored
    assert repository.exists(lookup) is True


def test_non_ascii_case_variant_cannot_register_or_miss_login(service: AuthService) -> None:
    first = service.register("Émile", "pass1")

    login = service.login("émile", "pass1")
    duplicate = service.register("émile", "pass1")

    assert first.success is True
    assert login.success is True
    assert duplicate.success is False
    assert duplicate.code is FailureCode.USERNAME_TAKEN


def test_database_rejects_case_variant_insert(repository: SqlAlchemyUserRepository) -> None:
    repository.add(_user("Alice"))

    with pytest.raises(IntegrityError):
        repository.add(_user("alice"))

    assert repository.find_by_username("ALICE").username == "Alice"


def test_database_rejects_rename_onto_case_variant(repository: SqlAlchemyUserRepository) -> None:
    repository.add(_user("Émile"))
    bob = repository.add(_user("bob"))

    with pytest.raises(IntegrityError):
        repository.save(bob.with_username("ÉMILE"))

    assert repository.find_by_id(bob.id).username == "bob"


class _StaleExistsRepository(SqlAlchemyUserRepository):
    """Reports every name as free, as a check racing a concurrent insert would."""

    def exists(self, username: str) -> bool:
        return False


def test_racing_registration_fails_through_constraint(token_issuer: JwtTokenIssuer) -> None:
    repository = _StaleExistsRepository()
    service = AuthService(
        users=repository,
        password_hasher=HmacSha512PasswordHasher(),
        tokens=token_issuer,
    )
    service.register("Alice", "pass1")

    result = service.register("alice", "pass1")

    assert result.success is False
    assert result.code is FailureCode.UNEXPECTED_ERROR
    assert result.data is None
    assert repository.find_by_username("alice").username == "Alice"


def test_rename_self_to_case_variant_keeps_row(
    service: AuthService, repository: SqlAlchemyUserRepository
) -> None:
    user_id = service.register("émile", "pass1").data

    result = service.change_username(user_id, "Émile")

    assert result.success is True
    assert repository.find_by_username("ÉMILE").username == "Émile"
