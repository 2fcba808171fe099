from __future__ import annotations

from datetime import timedelta

import jwt
import pytest
from jwt.utils import base64url_encode

from postboard.application.services.session_tokens import (
    ALGORITHM,
    TOKEN_LIFETIME,
    JwtSessionTokenService,
)
from postboard.shared.errors.base import AuthError

SECRET = "session-token-test-secret-0123456789abcdef"


@pytest.fixture()
def tokens(clock) -> JwtSessionTokenService:
    return JwtSessionTokenService(SECRET, clock=clock)


def test_issue_embeds_username_and_one_hour_expiry(tokens, clock) -> None:
    token = tokens.issue("alice")

    claims = jwt.decode(token, SECRET, algorithms=[ALGORITHM], options={"verify_exp": False})
    assert claims["username"] == "alice"
    assert claims["exp"] - claims["iat"] == int(TOKEN_LIFETIME.total_seconds())
    assert claims["iat"] == int(clock.now.timestamp())


def test_issue_is_deterministic_for_same_clock(tokens) -> None:
    assert tokens.issue("alice") == tokens.issue("alice")


def test_verify_returns_identity(tokens, clock) -> None:
    claims = tokens.verify(tokens.issue("alice"))

    assert claims.username == "alice"
    assert claims.expires_at == clock.now + TOKEN_LIFETIME


def test_token_valid_at_59_minutes_and_rejected_at_61(tokens, clock) -> None:
    token = tokens.issue("alice")

    clock.advance(minutes=59)
    assert tokens.verify(token).username == "alice"

    clock.advance(minutes=2)
    with pytest.raises(AuthError) as exc_info:
        tokens.verify(token)
    assert exc_info.value.reason == AuthError.INVALID
    assert exc_info.value.status == 403


@pytest.mark.parametrize("token", [None, ""])
def test_missing_token(tokens, token) -> None:
    with pytest.raises(AuthError) as exc_info:
        tokens.verify(token)

    assert exc_info.value.reason == AuthError.MISSING
    assert exc_info.value.status == 401


@pytest.mark.parametrize("token", ["garbage", "a.b.c", "Bearer x"])
def test_malformed_token_is_invalid(tokens, token) -> None:
    with pytest.raises(AuthError) as exc_info:
        tokens.verify(token)

    assert exc_info.value.reason == AuthError.INVALID


def test_token_signed_with_other_secret_is_invalid(tokens, clock) -> None:
    foreign = JwtSessionTokenService("another-secret-0123456789abcdefghijkl", clock=clock)

    with pytest.raises(AuthError) as exc_info:
        tokens.verify(foreign.issue("alice"))

    assert exc_info.value.code == "token_invalid"


def test_token_without_username_claim_is_invalid(tokens, clock) -> None:
    now = int(clock.now.timestamp())
    token = jwt.encode({"sub": "alice", "iat": now, "exp": now + 60}, SECRET, algorithm=ALGORITHM)

    with pytest.raises(AuthError):
        tokens.verify(token)


def test_tampered_payload_is_invalid(tokens, clock) -> None:
    header, _, signature = tokens.issue("alice").split(".")
    now = int(clock.now.timestamp())
    forged_payload = base64url_encode(
        f'{{"username":"mallory","iat":{now},"exp":{now + 60}}}'.encode()
    ).decode()

    with pytest.raises(AuthError):
        tokens.verify(f"{header}.{forged_payload}.{signature}")


def test_empty_secret_is_rejected() -> None:
    with pytest.raises(ValueError):
        JwtSessionTokenService("")


def test_expiry_boundary_is_exclusive(tokens, clock) -> None:
    token = tokens.issue("alice")

    clock.advance(seconds=TOKEN_LIFETIME.total_seconds() - 1)
    assert tokens.verify(token).username == "alice"

    clock.advance(seconds=1)
    with pytest.raises(AuthError):
        tokens.verify(token)


def test_expiry_checked_against_injected_clock_not_wall_clock(clock) -> None:
    clock.advance(days=-3650)
    service = JwtSessionTokenService(SECRET, clock=clock)
    token = service.issue("alice")

    clock.advance(minutes=30)
    assert service.verify(token).username == "alice"
    assert service.verify(token).issued_at == clock.now - timedelta(minutes=30)
