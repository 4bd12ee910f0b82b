# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Expense, ExpenseCategory, ExpenseDraft
from .repositories import ExpenseRepository

__all__ = ["Expense", "ExpenseCategory", "ExpenseDraft", "ExpenseRepository"]
