# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from cashly.application.services.auth_service import AuthService
from cashly.application.services.expense_service import ExpenseService
from cashly.application.services.password_hashing import HmacSha512PasswordHasher
from cashly.application.services.token_issuer import JwtTokenIssuer
from cashly.infrastructure.repositories.expenses.sqlalchemy_expense_repository import \
    SqlAlchemyExpenseRepository
from cashly.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from cashly.interfaces.http.controllers.auth_controller import AuthController
from cashly.interfaces.http.controllers.expense_controller import ExpenseController
from cashly.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config

    @cached_property
    def config(self) -> AppConfig:
        return self._config or load_config()

    @cached_property
    def password_hasher(self) -> HmacSha512PasswordHasher:
        return HmacSha512PasswordHasher()

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        return JwtTokenIssuer(
            self.config.token_secret,
            lifetime=timedelta(seconds=self.config.token_lifetime),
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def expense_repository(self) -> SqlAlchemyExpenseRepository:
        return SqlAlchemyExpenseRepository()

    @cached_property
    def auth_service(self) -> AuthService:
        return AuthService(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_issuer,
        )

    @cached_property
    def expense_service(self) -> ExpenseService:
        return ExpenseService(expenses=self.expense_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(auth_service=self.auth_service, tokens=self.token_issuer)

    @cached_property
    def expense_controller(self) -> ExpenseController:
        return ExpenseController(expense_service=self.expense_service, tokens=self.token_issuer)


container = Container()
