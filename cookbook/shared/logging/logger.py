# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Loguru setup shared by the whole service.

Every record carries the correlation id of the request that produced it, and
stdlib ``logging`` output (werkzeug, SQLAlchemy) goes through the same sinks.
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar
from pathlib import Path

from loguru import logger as _loguru

from .sensitive_filter import sanitize_record

LINE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}:{line}</cyan> | "
    "<lvl>{message}</lvl>"
)
DEFAULT_LOG_FILE = Path(__file__).resolve().parents[2] / "instance" / "app.log"
NO_CORRELATION_ID = "-"

_QUIET_LOGGERS = {
    "werkzeug": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
}

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default=NO_CORRELATION_ID)

_loguru.configure(extra={"correlation_id": NO_CORRELATION_ID})


class _StdlibBridge(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _loguru.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        _loguru.opt(depth=depth, exception=record.exc_info).bind(
            correlation_id=_correlation_id.get()
        ).log(level, record.getMessage())


class ContextualLogger:
    """Loguru proxy; every call is bound to the current correlation id."""

    def __getattr__(self, name: str):
        return getattr(_loguru.bind(correlation_id=_correlation_id.get()), name)


def set_correlation_id(value: str | None) -> None:
    _correlation_id.set(value or NO_CORRELATION_ID)


def get_correlation_id() -> str:
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set(NO_CORRELATION_ID)


def setup_logging(level: str | None = None, *, log_file: str | Path | None = None) -> None:
    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    path = Path(log_file or os.getenv("LOG_FILE") or DEFAULT_LOG_FILE)
    path.parent.mkdir(parents=True, exist_ok=True)

    sink_options = {
        "level": level,
        "format": LINE_FORMAT,
        "filter": sanitize_record,
        "backtrace": False,
        "diagnose": False,
    }
    _loguru.remove()
    _loguru.add(sys.stderr, colorize=True, **sink_options)
    _loguru.add(path, colorize=False, enqueue=True, encoding="utf-8", **sink_options)

    logging.basicConfig(handlers=[_StdlibBridge()], level=0, force=True)
    for name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)


logger = ContextualLogger()

__all__ = [
    "NO_CORRELATION_ID",
    "clear_correlation_id",
    "get_correlation_id",
    "logger",
    "set_correlation_id",
    "setup_logging",
]
