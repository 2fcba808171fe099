from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta

import pytest
from flask import Flask
from flask.testing import FlaskClient

from postboard.app import create_app
from postboard.infrastructure.container import Container
from postboard.shared.config import AppConfig

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture(autouse=True)
def isolated_log_file(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "app.log"))


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig(app_env="test", secret_key=TEST_SECRET)


@pytest.fixture()
def container(config: AppConfig) -> Container:
    return Container(config)


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container)


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def log_records(app: Flask) -> Iterator[list[tuple[str, str]]]:
    """Collect ``(level, message)`` pairs emitted after the app is built."""
    from loguru import logger

    records: list[tuple[str, str]] = []
    sink_id = logger.add(
        lambda message: records.append(
            (message.record["level"].name, message.record["message"])
        ),
        level="DEBUG",
    )
    yield records
    logger.remove(sink_id)
