# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, request
from pydantic import ValidationError

from cashly.application.services.auth_service import AuthService
from cashly.interfaces.http.auth import TokenDecoder, auth_required, current_user_id
from cashly.interfaces.http.dto.auth import (ChangePasswordRequestDTO,
                                             ChangeUsernameRequestDTO,
                                             LoginRequestDTO,
                                             RegisterRequestDTO)
from cashly.interfaces.http.responses import envelope
from cashly.shared.errors import ForbiddenError
from cashly.shared.errors.validation import raise_validation_error
from cashly.shared.logging import logger


def _json_body() -> dict:
    return request.get_json(silent=True) or {}


class AuthController:
    def __init__(self, *, auth_service: AuthService, tokens: TokenDecoder) -> None:
        self._auth_service = auth_service
        self._tokens = tokens

    def register(self) -> tuple[Response, HTTPStatus]:
        try:
            dto = RegisterRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        result = self._auth_service.register(dto.username, dto.password)
        logger.info(f"auth.register: success={result.success} username={dto.username}")
        return envelope(result)

    def login(self) -> tuple[Response, HTTPStatus]:
        try:
            dto = LoginRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        result = self._auth_service.login(dto.username, dto.password)
        logger.info(f"auth.login: success={result.success} username={dto.username}")
        return envelope(result)

    @auth_required
    def change_password(self) -> tuple[Response, HTTPStatus]:
        try:
            dto = ChangePasswordRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        return envelope(self._auth_service.change_password(current_user_id(), dto.password))

    @auth_required
    def change_username(self) -> tuple[Response, HTTPStatus]:
        try:
            dto = ChangeUsernameRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        return envelope(self._auth_service.change_username(current_user_id(), dto.username))

    @auth_required
    def delete_user(self, user_id: int) -> tuple[Response, HTTPStatus]:
        if user_id != current_user_id():
            logger.warning(
                f"auth.delete_user: user={current_user_id()} tried to delete user={user_id}"
            )
            raise ForbiddenError()

        return envelope(self._auth_service.delete_user(user_id))

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/change-password", view_func=self.change_password, methods=["POST"])
        bp.add_url_rule("/change-username", view_func=self.change_username, methods=["POST"])
        bp.add_url_rule(
            "/delete-user/<int:user_id>", view_func=self.delete_user, methods=["DELETE"]
        )
        return bp
