from __future__ import annotations

from collections.abc import Sequence

from cashly.domain.expenses.entities import Expense
from cashly.domain.expenses.repositories import ExpenseRepository
from cashly.domain.users.entities import User, normalize_username
from cashly.domain.users.repositories import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1
        self.fail_with: Exception | None = None

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def find_by_id(self, user_id: int) -> User | None:
        self._check()
        return self._users.get(user_id)

    def find_by_username(self, username: str) -> User | None:
        self._check()
        for user in self._users.values():
            if normalize_username(user.username) == normalize_username(username):
                return user
        return None

    def exists(self, username: str) -> bool:
        return self.find_by_username(username) is not None

    def add(self, user: User) -> User:
        self._check()
        new_user = User(
            id=self._seq,
            username=user.username,
            password_hash=user.password_hash,
            password_salt=user.password_salt,
        )
        self._seq += 1
        self._users[new_user.id] = new_user
        return new_user

    def save(self, user: User) -> User:
        self._check()
        self._users[user.id] = user
        return user

    def remove(self, user_id: int) -> None:
        self._check()
        self._users.pop(user_id, None)

    def all(self) -> list[User]:
        return list(self._users.values())


class InMemoryExpenseRepository(ExpenseRepository):
    def __init__(self) -> None:
        self._expenses: dict[int, Expense] = {}
        self._seq = 1
        self.fail_with: Exception | None = None

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def list_for_user(self, user_id: int) -> Sequence[Expense]:
        self._check()
        return [e for e in self._expenses.values() if e.user_id == user_id]

    def find_for_user(self, user_id: int, expense_id: int) -> Expense | None:
        self._check()
        expense = self._expenses.get(expense_id)
        if expense is None or expense.user_id != user_id:
            return None
        return expense

    def add(self, expense: Expense) -> Expense:
        self._check()
        created = Expense(
            id=self._seq,
            user_id=expense.user_id,
            title=expense.title,
            amount=expense.amount,
            date=expense.date,
            category=expense.category,
        )
        self._seq += 1
        self._expenses[created.id] = created
        return created

    def save(self, expense: Expense) -> Expense:
        self._check()
        self._expenses[expense.id] = expense
        return expense

    def remove(self, expense_id: int) -> None:
        self._check()
        self._expenses.pop(expense_id, None)
