"""Logging setup for page builds.

Log records never go to stdout: the rendered page may be written there.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Literal

LogOutput = Literal["console", "file", "both"]
LogFormat = Literal["text", "json"]

_TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_JSON_FORMAT = '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'

# Chatty at DEBUG (one line per connection); only shown when we debug too
_NOISY_LOGGERS = ("urllib3",)


def _env(name: str, default: str) -> str:
    return (os.environ.get(name) or default).strip()


def _handlers(output: str, file_path: str) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if output in ("console", "both"):
        handlers.append(logging.StreamHandler(sys.stderr))
    if output in ("file", "both"):
        log_dir = os.path.dirname(file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(RotatingFileHandler(file_path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"))
    return handlers


def configure_logging(
    level: str | int | None = None,
    output: LogOutput | None = None,
    file_path: str | None = None,
    log_format: LogFormat | None = None,
) -> None:
    """Configure the root logger for one run.

    Unset arguments fall back to ``LOG_LEVEL``, ``LOG_OUTPUT``,
    ``LOG_FILE_PATH`` and ``LOG_FORMAT``, read at call time so values from
    ``.env`` are seen.
    """
    level = level if level is not None else _env("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.upper()
    output = output or _env("LOG_OUTPUT", "console").lower()  # type: ignore[assignment]
    file_path = file_path or _env("LOG_FILE_PATH", "logs/frontpage.log")
    log_format = log_format or _env("LOG_FORMAT", "text").lower()  # type: ignore[assignment]

    formatter = logging.Formatter(_JSON_FORMAT if log_format == "json" else _TEXT_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    for handler in _handlers(output, file_path):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    quiet = logging.DEBUG if root_logger.level <= logging.DEBUG else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
