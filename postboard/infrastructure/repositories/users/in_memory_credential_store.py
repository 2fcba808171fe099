# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from threading import Lock

from postboard.domain.users.entities import User
from postboard.domain.users.exceptions import (
    CredentialsRequiredError,
    UserAlreadyExistsError,
)
from postboard.domain.users.repositories import CredentialStore


class InMemoryCredentialStore(CredentialStore):
    """Registered users keyed by username; lives as long as the process."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = Lock()

    def register(self, username: str, password: str) -> User:
        if not username or not password:
            raise CredentialsRequiredError()

        with self._lock:
            if username in self._users:
                raise UserAlreadyExistsError(username)
            user = User(username=username, password=password)
            self._users[username] = user
            return user

    def verify_credentials(self, username: str, password: str) -> User | None:
        if not username or not password:
            return None

        with self._lock:
            user = self._users.get(username)

        if user is None:
            return None
        if not secrets.compare_digest(user.password.encode(), password.encode()):
            return None
        return user

    def count(self) -> int:
        with self._lock:
            return len(self._users)


__all__ = ["InMemoryCredentialStore"]
