# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from postboard.domain.users.exceptions import (
    CredentialsRequiredError,
    InvalidCredentialsError,
)
from postboard.domain.users.repositories import CredentialStore, SessionTokenService


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: CredentialStore,
        tokens: SessionTokenService,
    ) -> None:
        self._users = users
        self._tokens = tokens

    def execute(self, username: str, password: str) -> str:
        if not username or not password:
            raise CredentialsRequiredError()

        user = self._users.verify_credentials(username, password)
        if user is None:
            raise InvalidCredentialsError()

        return self._tokens.issue(user.username)
