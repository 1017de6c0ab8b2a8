"""Logging helpers for multierr."""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "MULTIERR_LOG_LEVEL"


def resolve_log_level(default: int = logging.WARNING, override: int | str | None = None) -> int:
    value = override if override is not None else os.getenv(LOG_LEVEL_ENV)
    if value is None or value == "":
        return default
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {value!r} in {LOG_LEVEL_ENV}")
    return level


def _ensure_handler(logger: logging.Logger) -> None:
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def configure_logging(level: Optional[int | str] = None) -> None:
    """
    Attach the package handler and set the ``multierr`` logger level.

    Without ``level`` the value of ``MULTIERR_LOG_LEVEL`` is used, falling
    back to ``WARNING``.
    """

    logger = logging.getLogger("multierr")
    _ensure_handler(logger)
    logger.setLevel(resolve_log_level(override=level))


def get_logger(name: str) -> logging.Logger:
    _ensure_handler(logging.getLogger("multierr"))
    return logging.getLogger(f"multierr.{name}")
