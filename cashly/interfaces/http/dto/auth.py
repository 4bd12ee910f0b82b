# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Shape rules (whitespace, password length) belong to AuthService; these only
# guard against missing fields and oversized usernames.


class CredentialsRequestDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: str = Field(min_length=1, max_length=64)
    password: str


class RegisterRequestDTO(CredentialsRequestDTO):
    pass


class LoginRequestDTO(CredentialsRequestDTO):
    pass


class ChangePasswordRequestDTO(BaseModel):
    password: str


class ChangeUsernameRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
