# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from http import HTTPStatus
from typing import Any, TypeVar

from flask import Response, jsonify

from cashly.application.services.service_response import FailureCode, ServiceResponse

T = TypeVar("T")


def status_for(result: ServiceResponse[Any]) -> HTTPStatus:
    if result.success:
        return HTTPStatus.OK
    if result.code is FailureCode.UNEXPECTED_ERROR:
        return HTTPStatus.INTERNAL_SERVER_ERROR
    if result.code is not None and result.code.is_not_found:
        return HTTPStatus.NOT_FOUND
    return HTTPStatus.BAD_REQUEST


def envelope(
    result: ServiceResponse[T],
    serialize: Callable[[T], Any] | None = None,
) -> tuple[Response, HTTPStatus]:
    payload = result.to_dict()
    if serialize is not None and result.data is not None:
        payload["data"] = serialize(result.data)
    return jsonify(payload), status_for(result)
