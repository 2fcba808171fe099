# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from postboard.shared.logging import logger

from .base import AppError, InternalError


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, error.status


def register_error_handler(app: Flask, *, debug_mode: bool = False) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        identity = getattr(g, "identity", None)
        logger.warning(
            f"{request.method} {request.path} rejected: {exc.code} "
            f"({exc.message}) user={identity}"
        )
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        status = HTTPStatus(exc.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        logger.warning(f"{request.method} {request.path} -> {status.value} {status.phrase}")
        error = AppError(
            code=status.phrase.lower().replace(" ", "_"),
            status=status,
            message=status.phrase,
        )
        return handle_app_error(error)

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        ip_address = (
            request.headers.get("X-Forwarded-For", "").split(",")[0].strip()
            or request.remote_addr
            or "unknown"
        )
        identity = getattr(g, "identity", None)

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"from {ip_address}, user={identity}, body_size={len(request.data)}"
            )
        else:
            logger.error(
                f"Error: {type(exc).__name__} on {request.method} {request.path}: {exc}"
            )

        return handle_app_error(InternalError())
