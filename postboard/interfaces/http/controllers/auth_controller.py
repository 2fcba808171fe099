# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from postboard.application.use_cases.users.login_user import LoginUserUseCase
from postboard.application.use_cases.users.register_user import \
    RegisterUserUseCase
from postboard.interfaces.http.dto.auth import (LoginRequestDTO,
                                                MessageResponseDTO,
                                                RegisterRequestDTO,
                                                TokenResponseDTO)
from postboard.shared.errors.validation import raise_validation_error
from postboard.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.username or "", dto.password or "")

        payload = MessageResponseDTO(
            status=int(HTTPStatus.CREATED), message="User registered successfully"
        ).model_dump()
        logger.info(f"auth.register: ok username={user.username}")
        return jsonify(payload), HTTPStatus.CREATED

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        token = self._login_use_case.execute(dto.username or "", dto.password or "")

        payload = TokenResponseDTO(token=token).model_dump()
        logger.info(f"auth.login: ok username={dto.username}")
        return jsonify(payload), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
