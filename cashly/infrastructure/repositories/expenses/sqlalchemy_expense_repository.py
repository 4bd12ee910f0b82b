# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from sqlalchemy import select

from cashly.domain.expenses.entities import Expense as DomainExpense
from cashly.domain.expenses.entities import ExpenseCategory
from cashly.domain.expenses.repositories import ExpenseRepository
from cashly.infrastructure.db.models import Expense
from cashly.infrastructure.db.session import session_scope


def _to_domain(row: Expense) -> DomainExpense:
    return DomainExpense(
        id=row.id,
        user_id=row.user_id,
        title=row.title,
        amount=Decimal(row.amount),
        date=row.date,
        category=ExpenseCategory(row.category),
    )


class SqlAlchemyExpenseRepository(ExpenseRepository):
    def list_for_user(self, user_id: int) -> Sequence[DomainExpense]:
        with session_scope() as session:
            rows = session.scalars(
                select(Expense)
                .where(Expense.user_id == user_id)
                .order_by(Expense.date.desc(), Expense.id.desc())
            ).all()
            return [_to_domain(row) for row in rows]

    def find_for_user(self, user_id: int, expense_id: int) -> DomainExpense | None:
        with session_scope() as session:
            row = session.scalars(
                select(Expense).where(Expense.id == expense_id, Expense.user_id == user_id)
            ).first()
            if not row:
                return None
            return _to_domain(row)

    def add(self, expense: DomainExpense) -> DomainExpense:
        with session_scope() as session:
            row = Expense(
                user_id=expense.user_id,
                title=expense.title,
                amount=expense.amount,
                date=expense.date,
                category=expense.category.value,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def save(self, expense: DomainExpense) -> DomainExpense:
        with session_scope() as session:
            row = session.get(Expense, expense.id)
            if row is None:
                raise LookupError(f"expense {expense.id} no longer exists")
            row.title = expense.title
            row.amount = expense.amount
            row.date = expense.date
            row.category = expense.category.value
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def remove(self, expense_id: int) -> None:
        with session_scope() as session:
            row = session.get(Expense, expense_id)
            if row is not None:
                session.delete(row)
