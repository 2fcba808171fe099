# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from pydantic import BaseModel


class CredentialsRequestDTO(BaseModel):
    # Emptiness is enforced by the credential store; the DTO only rejects
    # values that are not strings.
    username: str | None = None
    password: str | None = None


class RegisterRequestDTO(CredentialsRequestDTO):
    pass


class LoginRequestDTO(CredentialsRequestDTO):
    pass


class MessageResponseDTO(BaseModel):
    success: bool = True
    status: int = int(HTTPStatus.OK)
    message: str


class TokenResponseDTO(BaseModel):
    success: bool = True
    status: int = int(HTTPStatus.OK)
    token: str
