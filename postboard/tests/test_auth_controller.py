from __future__ import annotations

from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from postboard.application.use_cases.users.login_user import LoginUserUseCase
from postboard.application.use_cases.users.register_user import \
    RegisterUserUseCase
from postboard.domain.users.entities import User
from postboard.domain.users.exceptions import (InvalidCredentialsError,
                                               UserAlreadyExistsError)
from postboard.interfaces.http.controllers.auth_controller import AuthController
from postboard.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def test_register_endpoint_returns_201(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str]] = {}

    class StubRegister:
        def execute(self, username: str, password: str) -> User:
            register_called["args"] = (username, password)
            return User(username=username, password=password)

    controller = AuthController(
        register_use_case=cast(RegisterUserUseCase, StubRegister()),
        login_use_case=MagicMock(),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/register", json={"username": "alice", "password": "pw1"})

    assert response.status_code == 201
    assert register_called["args"] == ("alice", "pw1")
    assert response.get_json() == {
        "success": True,
        "status": 201,
        "message": "User registered successfully",
    }


def test_register_conflict_returns_409(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.side_effect = UserAlreadyExistsError("alice")
    controller = AuthController(register_use_case=register, login_use_case=MagicMock())
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/register", json={"username": "alice", "password": "pw1"})

    assert response.status_code == 409
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"] == "user_already_exists"
    assert payload["message"] == "User already exists!"


def test_register_non_string_field_returns_400(flask_app: Flask) -> None:
    register = MagicMock()
    controller = AuthController(register_use_case=register, login_use_case=MagicMock())
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/register", json={"username": 123, "password": "pw1"})

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert payload["context"]["fields"] == ["username"]
    register.execute.assert_not_called()


def test_login_returns_token(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.return_value = "signed.jwt.token"
    controller = AuthController(
        register_use_case=MagicMock(),
        login_use_case=cast(LoginUserUseCase, login),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json={"username": "alice", "password": "pw1"})

    assert response.status_code == 200
    assert response.get_json()["token"] == "signed.jwt.token"
    login.execute.assert_called_once_with("alice", "pw1")


def test_login_missing_body_passes_empty_fields(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    controller = AuthController(register_use_case=MagicMock(), login_use_case=login)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", data="not json", content_type="text/plain")

    assert response.status_code == 401
    login.execute.assert_called_once_with("", "")


def test_unexpected_error_returns_500_without_details(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = RuntimeError("database password is hunter2")
    controller = AuthController(register_use_case=MagicMock(), login_use_case=login)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json={"username": "alice", "password": "pw1"})

    assert response.status_code == 500
    payload = response.get_json()
    assert payload == {
        "success": False,
        "status": 500,
        "error": "internal_error",
        "message": "Internal server error",
    }
