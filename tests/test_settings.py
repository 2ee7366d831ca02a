"""Tests for environment settings validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from src.config.settings import Settings, load_settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # Keep a developer's local `.env` out of the tests.
    monkeypatch.chdir(tmp_path)
    for name in (
            "TELEGRAM_BOT_TOKEN",
            "QUERY_DELAY_S",
            "UPLOAD_DELAY_S",
            "RESULT_TABLE_ROWS",
            "DATASET_PREVIEW_ROWS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
    settings = load_settings()

    assert settings.telegram_bot_token == "123:abc"
    assert settings.query_delay_s == 1.5
    assert settings.upload_delay_s == 1.0
    assert settings.result_table_rows == 10
    assert settings.dataset_preview_rows == 5


def test_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
    monkeypatch.setenv("QUERY_DELAY_S", "0")
    monkeypatch.setenv("RESULT_TABLE_ROWS", "3")

    settings = Settings()
    assert settings.query_delay_s == 0
    assert settings.result_table_rows == 3


def test_missing_token_is_a_startup_error() -> None:
    with pytest.raises(RuntimeError, match="Invalid environment configuration"):
        load_settings()


def test_negative_delay_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
    monkeypatch.setenv("UPLOAD_DELAY_S", "-1")

    with pytest.raises(RuntimeError):
        load_settings()
