# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str = ""
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "success": False,
            "status": int(self.status),
            "error": self.code,
            "message": self.message or self.status.phrase,
        }
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        message: str = "Invalid request payload",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            message=message,
            context=context,
        )


class ConflictError(AppError):
    def __init__(
        self,
        code: str = "conflict",
        *,
        message: str = "Conflict",
        status: HTTPStatus = HTTPStatus.CONFLICT,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(code=code, status=status, message=message, context=context)


class AuthError(AppError):
    """Bearer token problem; ``reason`` is either ``missing`` or ``invalid``."""

    MISSING = "missing"
    INVALID = "invalid"

    def __init__(self, reason: str) -> None:
        if reason == self.MISSING:
            super().__init__(
                code="token_required",
                status=HTTPStatus.UNAUTHORIZED,
                message="Token required",
            )
        else:
            super().__init__(
                code="token_invalid",
                status=HTTPStatus.FORBIDDEN,
                message="Invalid token",
            )
        self.reason = reason if reason == self.MISSING else self.INVALID


class ForbiddenError(AppError):
    def __init__(
        self,
        code: str = "forbidden",
        *,
        message: str = "Forbidden",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code, status=HTTPStatus.FORBIDDEN, message=message, context=context
        )


class NotFoundError(AppError):
    def __init__(
        self,
        code: str = "not_found",
        *,
        message: str = "Not found",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code, status=HTTPStatus.NOT_FOUND, message=message, context=context
        )


class InternalError(AppError):
    def __init__(self, code: str = "internal_error") -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            message="Internal server error",
        )
