# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from postboard.domain.users.repositories import SessionTokenService

BEARER_SCHEME = "bearer"


def extract_bearer_token(header: str | None) -> str | None:
    if not header:
        return None
    scheme, _, token = header.strip().partition(" ")
    if scheme.lower() != BEARER_SCHEME:
        return None
    return token.strip() or None


class RequestAuthenticator:
    """Resolves the caller's identity from an ``Authorization`` header value.

    Raises ``AuthError("missing")`` when no bearer token is present and
    ``AuthError("invalid")`` when one is present but does not verify.
    """

    def __init__(self, *, tokens: SessionTokenService) -> None:
        self._tokens = tokens

    def authenticate(self, header: str | None) -> str:
        token = extract_bearer_token(header)
        claims = self._tokens.verify(token)
        return claims.username


__all__ = ["RequestAuthenticator", "extract_bearer_token"]
