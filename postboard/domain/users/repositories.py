# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import SessionClaims, User


class CredentialStore(Protocol):
    def register(self, username: str, password: str) -> User: ...
    def verify_credentials(self, username: str, password: str) -> User | None: ...
    def count(self) -> int: ...


class SessionTokenService(Protocol):
    def issue(self, username: str) -> str: ...
    def verify(self, token: str | None) -> SessionClaims: ...
