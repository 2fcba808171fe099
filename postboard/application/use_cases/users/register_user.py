# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from postboard.domain.users.entities import User
from postboard.domain.users.repositories import CredentialStore


class RegisterUserUseCase:
    def __init__(self, *, users: CredentialStore) -> None:
        self._users = users

    def execute(self, username: str, password: str) -> User:
        return self._users.register(username, password)
