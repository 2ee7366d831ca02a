"""Logging configuration for the demo bot."""

from __future__ import annotations

import logging
import os

# Per-update aiogram lines and matplotlib/Pillow font and PNG chatter drown the pipeline's own
# `handled category=...` lines at INFO.
NOISY_LOGGERS: tuple[str, ...] = ("aiogram.event", "matplotlib", "PIL")


def configure_logging(level: str | None = None) -> str:
    """Configure Python logging for the process and return the effective level name.

    Logs are for internal diagnostics only; users only ever see rendered payloads and fixed
    messages. Third-party noise stays at WARNING unless the process itself runs at DEBUG.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    noisy_level = logging.DEBUG if log_level == "DEBUG" else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)
    return log_level
