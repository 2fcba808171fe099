from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger

from postboard.app import create_app
from postboard.infrastructure.container import Container
from postboard.shared.config import AppConfig, load_config


@pytest.fixture()
def production_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.delenv("SECRET_KEY", raising=False)
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture()
def error_records() -> Iterator[list[dict]]:
    records: list[dict] = []
    yield records
    logger.remove()


def _failing_app(
    config: AppConfig, monkeypatch: pytest.MonkeyPatch, records: list[dict]
):
    container = Container(config)
    app = create_app(container)

    def _boom():
        raise RuntimeError("store exploded")

    monkeypatch.setattr(container.list_posts_use_case, "execute", _boom)
    logger.add(lambda message: records.append(message.record), level="ERROR")
    return app


def test_injected_config_wins_over_environment(production_env) -> None:
    config = AppConfig(app_env="test", secret_key="injected-secret-strong-enough-for-hs256")

    app = create_app(Container(config))

    with app.test_client() as client:
        assert client.get("/health").status_code == 200
        missing = client.get("/nowhere")

    assert missing.status_code == 404
    assert missing.get_json()["error"] == "not_found"


def test_debug_logging_attaches_traceback(
    config: AppConfig, monkeypatch: pytest.MonkeyPatch, error_records: list[dict]
) -> None:
    debug_config = config.model_copy(update={"debug_logging": True})
    app = _failing_app(debug_config, monkeypatch, error_records)

    response = app.test_client().get("/posts")

    assert response.status_code == 500
    assert response.get_json()["error"] == "internal_error"
    assert any(record["exception"] is not None for record in error_records)


def test_plain_logging_reports_error_without_traceback(
    config: AppConfig, monkeypatch: pytest.MonkeyPatch, error_records: list[dict]
) -> None:
    app = _failing_app(config, monkeypatch, error_records)

    response = app.test_client().get("/posts")

    assert response.status_code == 500
    assert "store exploded" not in response.get_data(as_text=True)
    assert error_records
    assert all(record["exception"] is None for record in error_records)
    assert "RuntimeError" in error_records[0]["message"]
