# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, cast

from flask import g, request

from postboard.application.services.request_authenticator import RequestAuthenticator
from postboard.shared.logging import logger


def current_identity() -> str:
    """Username resolved by ``auth_required`` for the current request."""
    return cast(str, g.identity)


def auth_required(authenticator: RequestAuthenticator) -> Callable[[Callable], Callable]:
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def inner(*a: Any, **kw: Any) -> Any:
            identity = authenticator.authenticate(request.headers.get("Authorization"))
            g.identity = identity
            logger.debug(f"Auth OK: user={identity} {request.method} {request.path}")
            return f(*a, **kw)

        return inner

    return decorator


__all__ = ["auth_required", "current_identity"]
