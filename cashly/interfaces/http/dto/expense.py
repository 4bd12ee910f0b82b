# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from cashly.domain.expenses.entities import ExpenseCategory, ExpenseDraft


class ExpenseRequestDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    title: str = Field(min_length=1, max_length=100)
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    date: dt.date
    category: ExpenseCategory

    def to_draft(self) -> ExpenseDraft:
        return ExpenseDraft(
            title=self.title,
            amount=self.amount,
            date=self.date,
            category=self.category,
        )
