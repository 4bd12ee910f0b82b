# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import select

from cashly.domain.users.entities import User as DomainUser
from cashly.domain.users.entities import normalize_username
from cashly.domain.users.repositories import UserRepository
from cashly.infrastructure.db.models import User
from cashly.infrastructure.db.session import session_scope


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=bytes(row.password_hash),
        password_salt=bytes(row.password_salt),
    )


def _username_matches(username: str):
    return User.username_key == normalize_username(username)


class SqlAlchemyUserRepository(UserRepository):
    def find_by_id(self, user_id: int) -> DomainUser | None:
        with session_scope() as session:
            row = session.get(User, user_id)
            if not row:
                return None
            return _to_domain(row)

    def find_by_username(self, username: str) -> DomainUser | None:
        with session_scope() as session:
            row = session.scalars(select(User).where(_username_matches(username))).first()
            if not row:
                return None
            return _to_domain(row)

    def exists(self, username: str) -> bool:
        with session_scope() as session:
            found = session.scalar(select(User.id).where(_username_matches(username)).limit(1))
            return found is not None

    def add(self, user: DomainUser) -> DomainUser:
        with session_scope() as session:
            row = User(
                username=user.username,
                username_key=normalize_username(user.username),
                password_hash=user.password_hash,
                password_salt=user.password_salt,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def save(self, user: DomainUser) -> DomainUser:
        with session_scope() as session:
            row = session.get(User, user.id)
            if row is None:
                raise LookupError(f"user {user.id} no longer exists")
            row.username = user.username
            row.username_key = normalize_username(user.username)
            row.password_hash = user.password_hash
            row.password_salt = user.password_salt
            session.flush()
            return _to_domain(row)

    def remove(self, user_id: int) -> None:
        with session_scope() as session:
            row = session.get(User, user_id)
            if row is not None:
                session.delete(row)
