# =============================================================================
# File: logger.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import logging
import os
import sys
import traceback
from logging.handlers import RotatingFileHandler
from typing import Any, Optional, Set

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

_configured_loggers: Set[str] = set()


def get_logger(name: str = "envguard", log_path: Optional[str] = None) -> logging.Logger:
    """
    Returns a configured logger instance.
    - Always attaches a console handler.
    - Adds a rotating file handler when a log path is given or APP_LOG_PATH is set.
    - Avoids duplicate handlers for the same logger.
    """
    full_name = name if name.startswith("envguard") else f"envguard.{name}"
    logger = logging.getLogger(full_name)
    level = logging.DEBUG if os.getenv("APP_DEBUG_MODE", "0") == "1" else logging.INFO
    logger.setLevel(level)

    if full_name in _configured_loggers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", "%Y-%m-%d %H:%M:%S"
    )

    # Console handler
    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    if log_path is None:
        log_path = os.getenv("APP_LOG_PATH") or None

    # Rotating file handler
    if log_path:
        try:
            log_dir = os.path.dirname(log_path)
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir)
            fh = RotatingFileHandler(
                log_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
            )
            fh.setFormatter(formatter)
            logger.addHandler(fh)
        except OSError as e:
            print(
                f"Warning: Failed to create log file handler for {log_path}: {e}",
                file=sys.stderr,
            )
            traceback.print_exc(file=sys.stderr)

    # Avoid log message duplication in parent loggers
    logger.propagate = False
    _configured_loggers.add(full_name)

    return logger


class AppLogger:
    """
    Leveled logger whose verbosity is fixed by the runtime mode at construction.

    In development every level is emitted with a bracketed tag. In production
    only errors are emitted, and only their primary message, so that stack
    traces and extra context never reach the console.
    """

    def __init__(self, is_development: bool, logger: Optional[logging.Logger] = None):
        self.is_development = is_development
        self._logger = logger or get_logger("app")

    def info(self, message: Any, *args: Any) -> None:
        if self.is_development:
            self._logger.info(self._join("[INFO]", message, args))

    def warn(self, message: Any, *args: Any) -> None:
        if self.is_development:
            self._logger.warning(self._join("[WARN]", message, args))

    def error(self, message: Any, *args: Any) -> None:
        if self.is_development:
            self._logger.error(self._join("[ERROR]", message, args))
        else:
            self._logger.error(f"[ERROR] {message}")

    def debug(self, message: Any, *args: Any) -> None:
        if self.is_development:
            self._logger.debug(self._join("[DEBUG]", message, args))

    def success(self, message: Any, *args: Any) -> None:
        if self.is_development:
            self._logger.log(SUCCESS, self._join("[SUCCESS]", message, args))

    @staticmethod
    def _join(tag: str, message: Any, args: tuple) -> str:
        return " ".join([tag, str(message)] + [str(a) for a in args])
