# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from postboard.shared.errors.base import AppError, ConflictError, ValidationError


class CredentialsRequiredError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            code="credentials_required",
            message="username and password required!",
        )


class UserAlreadyExistsError(ConflictError):
    def __init__(self, username: str) -> None:
        super().__init__(
            code="user_already_exists",
            message="User already exists!",
            context={"username": username},
        )


class InvalidCredentialsError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="invalid_credentials",
            status=HTTPStatus.UNAUTHORIZED,
            message="Invalid credentials!",
        )
