# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, request
from pydantic import ValidationError

from cashly.application.services.expense_service import ExpenseService
from cashly.domain.expenses.entities import Expense, ExpenseDraft
from cashly.interfaces.http.auth import TokenDecoder, auth_required, current_user_id
from cashly.interfaces.http.dto.expense import ExpenseRequestDTO
from cashly.interfaces.http.responses import envelope
from cashly.shared.errors.validation import raise_validation_error


def _serialize_one(expense: Expense) -> dict[str, object]:
    return expense.to_dict()


def _serialize_many(expenses: list[Expense]) -> list[dict[str, object]]:
    return [expense.to_dict() for expense in expenses]


def _parse_draft() -> ExpenseDraft:
    try:
        dto = ExpenseRequestDTO.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)
    return dto.to_draft()


class ExpenseController:
    def __init__(self, *, expense_service: ExpenseService, tokens: TokenDecoder) -> None:
        self._expense_service = expense_service
        self._tokens = tokens

    @auth_required
    def list_expenses(self) -> tuple[Response, HTTPStatus]:
        result = self._expense_service.list_expenses(current_user_id())
        return envelope(result, _serialize_many)

    @auth_required
    def add_expense(self) -> tuple[Response, HTTPStatus]:
        draft = _parse_draft()
        return envelope(self._expense_service.add_expense(current_user_id(), draft), _serialize_one)

    @auth_required
    def get_expense(self, expense_id: int) -> tuple[Response, HTTPStatus]:
        result = self._expense_service.get_expense(current_user_id(), expense_id)
        return envelope(result, _serialize_one)

    @auth_required
    def update_expense(self, expense_id: int) -> tuple[Response, HTTPStatus]:
        draft = _parse_draft()
        result = self._expense_service.update_expense(current_user_id(), expense_id, draft)
        return envelope(result, _serialize_one)

    @auth_required
    def delete_expense(self, expense_id: int) -> tuple[Response, HTTPStatus]:
        return envelope(self._expense_service.delete_expense(current_user_id(), expense_id))

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("expense", __name__, url_prefix="/api/expense")
        bp.add_url_rule("", view_func=self.list_expenses, methods=["GET"])
        bp.add_url_rule("", view_func=self.add_expense, methods=["POST"])
        bp.add_url_rule("/<int:expense_id>", view_func=self.get_expense, methods=["GET"])
        bp.add_url_rule("/<int:expense_id>", view_func=self.update_expense, methods=["PUT"])
        bp.add_url_rule("/<int:expense_id>", view_func=self.delete_expense, methods=["DELETE"])
        return bp
