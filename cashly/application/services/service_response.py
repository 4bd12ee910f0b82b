# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Uniform result envelope returned by the application services."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from functools import wraps
from typing import Any, Generic, ParamSpec, TypeVar

from cashly.shared.logging import logger

P = ParamSpec("P")
T = TypeVar("T")


class FailureCode(str, Enum):
    USERNAME_TAKEN = "username_taken"
    INVALID_USERNAME = "invalid_username"
    INVALID_PASSWORD = "invalid_password"
    PASSWORD_UNCHANGED = "password_unchanged"
    USER_NOT_FOUND = "user_not_found"
    WRONG_PASSWORD = "wrong_password"
    EXPENSE_NOT_FOUND = "expense_not_found"
    UNEXPECTED_ERROR = "unexpected_error"

    @property
    def is_not_found(self) -> bool:
        return self.value.endswith("_not_found")


@dataclass(slots=True, frozen=True)
class ServiceResponse(Generic[T]):
    success: bool
    message: str
    data: T | None = None
    code: FailureCode | None = None

    @classmethod
    def ok(cls, data: T, message: str = "") -> ServiceResponse[T]:
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, message: str, code: FailureCode) -> ServiceResponse[T]:
        return cls(success=False, message=message, code=code)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "data": self.data,
            "code": self.code.value if self.code else None,
        }


def guarded(operation: str) -> Callable[
    [Callable[P, ServiceResponse[T]]], Callable[P, ServiceResponse[T]]
]:
    """Convert exceptions escaping ``operation`` into a failed response."""

    def decorator(func: Callable[P, ServiceResponse[T]]) -> Callable[P, ServiceResponse[T]]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> ServiceResponse[T]:
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                logger.exception(f"{operation}: unexpected {type(exc).__name__}")
                return ServiceResponse.fail(str(exc), FailureCode.UNEXPECTED_ERROR)

        return wrapper

    return decorator
