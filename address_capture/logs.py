# address_capture/logs.py
"""
Logging setup for the CLI.

- Console handler on the `address_capture` logger (INFO, or DEBUG when enabled)
- When ADDRESS_CAPTURE_DEBUG is truthy: rotating file log at
  logs/address_capture.log (1 MB x 3)

Setup is best-effort; a missing logs/ directory never breaks a run.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

DEBUG_ENV = "ADDRESS_CAPTURE_DEBUG"
LOG_PATH = os.path.join("logs", "address_capture.log")

_FORMAT = "%(asctime)s %(levelname)s %(message)s"
_DATEFMT = "(%Y-%m-%d %H:%M:%S)"


def debug_enabled() -> bool:
    return os.getenv(DEBUG_ENV, "").strip().lower() in {"1", "true", "yes", "on"}


def _add_file_handler(logger: logging.Logger, log_path: str) -> None:
    try:
        os.makedirs(os.path.dirname(log_path) or ".", exist_ok=True)
        handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
    except OSError:
        # console logging keeps working
        return
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
    handler.setLevel(logging.DEBUG)
    logger.addHandler(handler)


def configure_logging(*, debug: bool | None = None, log_path: str = LOG_PATH) -> logging.Logger:
    """Configure and return the package logger. Safe to call repeatedly."""
    if debug is None:
        debug = debug_enabled()

    logger = logging.getLogger("address_capture")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Avoid duplicate handlers if called again in REPL/tests
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(fmt="%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(console)

    if debug:
        _add_file_handler(logger, log_path)

    return logger
