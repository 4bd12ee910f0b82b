# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class ExpenseCategory(str, Enum):
    UTILITY = "Utility"
    FOOD = "Food"
    FUN = "Fun"
    SHOPPING = "Shopping"
    OTHER = "Other"


@dataclass(slots=True, frozen=True)
class ExpenseDraft:
    title: str
    amount: Decimal
    date: dt.date
    category: ExpenseCategory


@dataclass(slots=True, frozen=True)
class Expense:

    id: int
    user_id: int
    title: str
    amount: Decimal
    date: dt.date
    category: ExpenseCategory

    @classmethod
    def from_draft(cls, draft: ExpenseDraft, *, user_id: int, expense_id: int = 0) -> Expense:
        return cls(
            id=expense_id,
            user_id=user_id,
            title=draft.title,
            amount=draft.amount,
            date=draft.date,
            category=draft.category,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "title": self.title,
            "amount": float(self.amount),
            "date": self.date.isoformat(),
            "category": self.category.value,
        }
