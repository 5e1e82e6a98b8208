# utils/logger.py
"""
Logging setup for the command-line entry point.

Library modules log through ``logging.getLogger(__name__)`` and never add
handlers. ``setup_logger`` builds one console handler and one rotating file
handler and shares them between the application logger and the top-level
package loggers, so ``core.report`` or ``analytics.sample_data`` records end
up in the same log file as the entry point's own messages.
"""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Iterable, List, Optional, Union

_DEFAULT_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_DEFAULT_FILE = os.getenv("LOG_FILE", "logs/tradestats.log")
_DEFAULT_MAX_MB = int(os.getenv("LOG_MAX_MB", "5"))      # 5 MB
_DEFAULT_BACKUPS = int(os.getenv("LOG_BACKUPS", "5"))    # keep 5 rotated files

APP_PACKAGES = ("analytics", "core", "models", "utils")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(level: int, log_file: Optional[str], to_console: bool) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers: List[logging.Handler] = []

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_file,
            maxBytes=_DEFAULT_MAX_MB * 1024 * 1024,
            backupCount=_DEFAULT_BACKUPS,
            encoding="utf-8"
        ))

    if to_console:
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
    return handlers


def setup_logger(name: str,
                 level: Union[str, int] = _DEFAULT_LEVEL,
                 log_file: Optional[str] = _DEFAULT_FILE,
                 to_console: bool = True,
                 packages: Iterable[str] = APP_PACKAGES) -> logging.Logger:
    """
    Configure the ``name`` logger and the ``packages`` loggers with shared
    console and rotating-file handlers.

    Re-using the same name returns the configured logger without adding
    handlers again. A package logger that already has handlers is left alone.
    """
    logger = logging.getLogger(name)
    if logger.handlers:  # already configured
        return logger

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    handlers = _build_handlers(level, log_file, to_console)

    targets = [logger] + [
        logging.getLogger(pkg) for pkg in packages
        if not logging.getLogger(pkg).handlers
    ]
    for target in targets:
        target.setLevel(level)
        for handler in handlers:
            target.addHandler(handler)

    return logger
