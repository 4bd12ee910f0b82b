# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Credential management: registration, login and account mutations.

Every public operation returns a :class:`ServiceResponse`. Validation and
lookup failures come back as failed responses with a reason code; anything
raised by the persistence layer is logged and converted into a failed
response carrying the original error message.
"""

from __future__ import annotations

from cashly.domain.users.entities import PasswordDigest, User, normalize_username
from cashly.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from cashly.shared.logging import logger

from .service_response import FailureCode, ServiceResponse, guarded

PASSWORD_MIN_LENGTH = 4
PASSWORD_MAX_LENGTH = 20


def is_valid_username(username: str) -> bool:
    return bool(username) and not any(ch.isspace() for ch in username)


def is_valid_password(password: str) -> bool:
    return PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH


class AuthService:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        tokens: TokenIssuer,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._tokens = tokens

    def user_exists(self, username: str) -> bool:
        """Case-insensitive existence check.

        A plain predicate rather than a ServiceResponse operation, so repository
        errors propagate to the caller.
        """
        return self._users.exists(username)

    @guarded("auth.register")
    def register(self, username: str, password: str) -> ServiceResponse[int]:
        if self.user_exists(username):
            logger.info(f"auth.register: username taken username={username}")
            return ServiceResponse.fail("Username is taken!", FailureCode.USERNAME_TAKEN)
        if not is_valid_username(username):
            return ServiceResponse.fail("Invalid username!", FailureCode.INVALID_USERNAME)
        if not is_valid_password(password):
            return ServiceResponse.fail(
                f"Password must be {PASSWORD_MIN_LENGTH}-{PASSWORD_MAX_LENGTH} characters!",
                FailureCode.INVALID_PASSWORD,
            )

        digest = self._password_hasher.hash(password)
        user = User(
            id=0,
            username=username,
            password_hash=digest.hash,
            password_salt=digest.salt,
        )
        persisted = self._users.add(user)
        logger.info(f"auth.register: ok user_id={persisted.id}")
        return ServiceResponse.ok(persisted.id, "Welcome to Cashly!")

    @guarded("auth.login")
    def login(self, username: str, password: str) -> ServiceResponse[str]:
        user = self._users.find_by_username(username)
        if user is None:
            logger.info(f"auth.login: unknown username={username}")
            return ServiceResponse.fail("User not found!", FailureCode.USER_NOT_FOUND)
        if not self._password_hasher.verify(password, _digest_of(user)):
            logger.info(f"auth.login: wrong password user_id={user.id}")
            return ServiceResponse.fail("Wrong password!", FailureCode.WRONG_PASSWORD)

        token = self._tokens.issue(user)
        logger.info(f"auth.login: ok user_id={user.id}")
        return ServiceResponse.ok(token, "Welcome!")

    @guarded("auth.change_password")
    def change_password(self, user_id: int, new_password: str) -> ServiceResponse[bool]:
        user = self._users.find_by_id(user_id)
        if user is None:
            return ServiceResponse.fail("User not found!", FailureCode.USER_NOT_FOUND)
        try:
            unchanged = self._password_hasher.verify(new_password, _digest_of(user))
        except (TypeError, ValueError) as exc:
            logger.warning(
                f"auth.change_password: stored digest unusable user_id={user_id} "
                f"({type(exc).__name__})"
            )
            return ServiceResponse.fail("Invalid password!", FailureCode.INVALID_PASSWORD)
        if unchanged:
            return ServiceResponse.fail(
                "Please enter a new password!", FailureCode.PASSWORD_UNCHANGED
            )
        if not is_valid_password(new_password):
            return ServiceResponse.fail("Invalid password!", FailureCode.INVALID_PASSWORD)

        self._users.save(user.with_password(self._password_hasher.hash(new_password)))
        logger.info(f"auth.change_password: ok user_id={user_id}")
        return ServiceResponse.ok(True, "Password has changed.")

    @guarded("auth.change_username")
    def change_username(self, user_id: int, new_username: str) -> ServiceResponse[bool]:
        user = self._users.find_by_id(user_id)
        if user is None:
            return ServiceResponse.fail("User not found!", FailureCode.USER_NOT_FOUND)
        # A pure case change of the caller's own name is not a collision.
        renaming_self = normalize_username(user.username) == normalize_username(new_username)
        if not renaming_self and self.user_exists(new_username):
            return ServiceResponse.fail("Username is taken!", FailureCode.USERNAME_TAKEN)
        if not is_valid_username(new_username):
            return ServiceResponse.fail("Invalid username!", FailureCode.INVALID_USERNAME)

        self._users.save(user.with_username(new_username))
        logger.info(f"auth.change_username: ok user_id={user_id}")
        return ServiceResponse.ok(True, "Username has changed!")

    @guarded("auth.delete_user")
    def delete_user(self, user_id: int) -> ServiceResponse[bool]:
        user = self._users.find_by_id(user_id)
        if user is None:
            return ServiceResponse.fail("User not found!", FailureCode.USER_NOT_FOUND)

        self._users.remove(user.id)
        logger.info(f"auth.delete_user: ok user_id={user_id}")
        return ServiceResponse.ok(True, "Account deleted. Sorry to see you go.")


def _digest_of(user: User) -> PasswordDigest:
    return PasswordDigest(hash=user.password_hash, salt=user.password_salt)
