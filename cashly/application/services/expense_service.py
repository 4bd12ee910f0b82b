# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from cashly.domain.expenses.entities import Expense, ExpenseDraft
from cashly.domain.expenses.repositories import ExpenseRepository
from cashly.shared.logging import logger

from .service_response import FailureCode, ServiceResponse, guarded

_NOT_FOUND = "Expense not found!"


class ExpenseService:
    """Expense CRUD scoped to the owning user."""

    def __init__(self, *, expenses: ExpenseRepository) -> None:
        self._expenses = expenses

    @guarded("expense.list")
    def list_expenses(self, user_id: int) -> ServiceResponse[list[Expense]]:
        items = sorted(
            self._expenses.list_for_user(user_id),
            key=lambda e: (e.date, e.id),
            reverse=True,
        )
        return ServiceResponse.ok(items)

    @guarded("expense.get")
    def get_expense(self, user_id: int, expense_id: int) -> ServiceResponse[Expense]:
        expense = self._expenses.find_for_user(user_id, expense_id)
        if expense is None:
            return ServiceResponse.fail(_NOT_FOUND, FailureCode.EXPENSE_NOT_FOUND)
        return ServiceResponse.ok(expense)

    @guarded("expense.add")
    def add_expense(self, user_id: int, draft: ExpenseDraft) -> ServiceResponse[Expense]:
        created = self._expenses.add(Expense.from_draft(draft, user_id=user_id))
        logger.info(f"expense.add: ok user_id={user_id} expense_id={created.id}")
        return ServiceResponse.ok(created, "Expense added!")

    @guarded("expense.update")
    def update_expense(
        self, user_id: int, expense_id: int, draft: ExpenseDraft
    ) -> ServiceResponse[Expense]:
        if self._expenses.find_for_user(user_id, expense_id) is None:
            return ServiceResponse.fail(_NOT_FOUND, FailureCode.EXPENSE_NOT_FOUND)

        updated = self._expenses.save(
            Expense.from_draft(draft, user_id=user_id, expense_id=expense_id)
        )
        logger.info(f"expense.update: ok user_id={user_id} expense_id={expense_id}")
        return ServiceResponse.ok(updated, "Expense updated!")

    @guarded("expense.delete")
    def delete_expense(self, user_id: int, expense_id: int) -> ServiceResponse[bool]:
        if self._expenses.find_for_user(user_id, expense_id) is None:
            return ServiceResponse.fail(_NOT_FOUND, FailureCode.EXPENSE_NOT_FOUND)

        self._expenses.remove(expense_id)
        logger.info(f"expense.delete: ok user_id={user_id} expense_id={expense_id}")
        return ServiceResponse.ok(True, "Expense deleted!")
