# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless session tokens signed with the process secret."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from postboard.domain.users.entities import SessionClaims
from postboard.domain.users.repositories import SessionTokenService
from postboard.shared.errors.base import AuthError
from postboard.shared.logging import logger

TOKEN_LIFETIME = timedelta(hours=1)
ALGORITHM = "HS256"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtSessionTokenService(SessionTokenService):
    """Issues and verifies HS256 JWTs carrying a ``username`` claim.

    Expiry is checked against the injected clock rather than PyJWT's own
    wall-clock check so the one hour window can be exercised in tests.
    """

    def __init__(self, secret: str, *, clock: Callable[[], datetime] = _utcnow) -> None:
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self._clock = clock

    def issue(self, username: str) -> str:
        issued_at = self._clock()
        expires_at = issued_at + TOKEN_LIFETIME
        payload = {
            "username": username,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str | None) -> SessionClaims:
        if not token:
            raise AuthError(AuthError.MISSING)

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={
                    "require": ["username", "iat", "exp"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as exc:
            logger.debug(f"session token rejected: {type(exc).__name__}")
            raise AuthError(AuthError.INVALID) from exc

        username = claims.get("username")
        exp = claims.get("exp")
        iat = claims.get("iat")
        if not isinstance(username, str) or not username:
            raise AuthError(AuthError.INVALID)
        if not isinstance(exp, int | float) or not isinstance(iat, int | float):
            raise AuthError(AuthError.INVALID)

        expires_at = datetime.fromtimestamp(exp, UTC)
        if self._clock() >= expires_at:
            logger.debug(f"session token expired for user={username}")
            raise AuthError(AuthError.INVALID)

        return SessionClaims(
            username=username,
            issued_at=datetime.fromtimestamp(iat, UTC),
            expires_at=expires_at,
        )


__all__ = ["ALGORITHM", "TOKEN_LIFETIME", "JwtSessionTokenService"]
