"""Tests for process logging configuration."""

from __future__ import annotations

import logging

import pytest

from src.config.logging import NOISY_LOGGERS, configure_logging


def test_third_party_loggers_are_quiet_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    assert configure_logging() == "INFO"
    for name in NOISY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_debug_level_unmutes_third_party_loggers() -> None:
    assert configure_logging("debug") == "DEBUG"
    for name in NOISY_LOGGERS:
        assert logging.getLogger(name).level == logging.DEBUG
    configure_logging("INFO")
