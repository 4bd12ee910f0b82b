# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Expense


class ExpenseRepository(Protocol):
    def list_for_user(self, user_id: int) -> Sequence[Expense]: ...
    def find_for_user(self, user_id: int, expense_id: int) -> Expense | None: ...
    def add(self, expense: Expense) -> Expense: ...
    def save(self, expense: Expense) -> Expense: ...
    def remove(self, expense_id: int) -> None: ...
