# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
import time
from typing import Any

from flask import Flask, Response, g, request

from postboard.shared.logging import clear_correlation_id, logger, set_correlation_id


def _get_client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    return request.remote_addr or "unknown"


def _get_identity() -> str | None:
    return getattr(g, "identity", None)


def _sanitize_headers(headers: dict[str, str]) -> dict[str, str]:
    sensitive_headers = {"authorization", "cookie", "x-api-key", "x-auth-token"}

    sanitized = {}
    for key, value in headers.items():
        if key.lower() in sensitive_headers:
            sanitized[key] = f"<hashed:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"
        else:
            sanitized[key] = value

    return sanitized


def _sanitize_query_params(params: dict[str, Any]) -> dict[str, Any]:
    sensitive_params = {"password", "token", "key", "secret", "auth"}

    sanitized = {}
    for key, value in params.items():
        key_lower = key.lower()
        if any(sensitive in key_lower for sensitive in sensitive_params):
            sanitized[key] = "<redacted>"
        else:
            sanitized[key] = value

    return sanitized


def _log_request_start(debug_mode: bool) -> None:
    ip_address = _get_client_ip()

    if debug_mode:
        headers = _sanitize_headers(dict(request.headers))
        query_params = _sanitize_query_params(dict(request.args))

        logger.debug(
            f"Request started: {request.method} {request.path} "
            f"from {ip_address}, query={query_params}, headers={headers}, "
            f"body_size={len(request.data)}"
        )
    else:
        logger.debug(f"Request: {request.method} {request.path} from {ip_address}")


def _log_request_end(debug_mode: bool, status_code: int, start_time: float) -> None:
    duration = time.perf_counter() - start_time

    if debug_mode:
        logger.debug(
            f"Request completed: {request.method} {request.path} "
            f"status={status_code}, duration={duration:.3f}s, "
            f"from {_get_client_ip()}, user={_get_identity()}"
        )
    else:
        logger.debug(
            f"Response: {request.method} {request.path} "
            f"status={status_code}, duration={duration:.3f}s"
        )


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    @app.before_request
    def _before_request() -> None:
        correlation_id = request.headers.get("X-Request-ID") or secrets.token_urlsafe(8)
        set_correlation_id(correlation_id)
        g.request_start_time = time.perf_counter()

        _log_request_start(debug_mode)

    @app.after_request
    def _after_request(response: Response) -> Response:
        start_time = getattr(g, "request_start_time", time.perf_counter())
        _log_request_end(debug_mode, response.status_code, start_time)
        return response

    @app.teardown_request
    def _teardown_request(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(
                f"Request error: {type(exc).__name__} on "
                f"{request.method} {request.path}"
            )

        clear_correlation_id()


__all__ = ["configure_request_logging"]
