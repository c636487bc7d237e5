"""
Logging setup for bannercheck.

- Configure logging once via `setup_logging(...)` from the CLI.
- Get module-specific loggers via `get_logger(__name__)`.
- Lookups report diagnostics through a `Warner`, so callers can swap the sink.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Protocol

_CONFIGURED = False

FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


class Warner(Protocol):
    """Anything that can take a warning message."""

    def warn(self, message: str) -> None:
        ...


class LoggerWarner:
    """Warner backed by a stdlib logger."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def warn(self, message: str) -> None:
        self.logger.warning(message)


def setup_logging(
    level: str | int = "WARNING",
    log_file: str | Path | None = None,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> None:
    """
    Configure root logging with a stderr handler and an optional rotating file.

    Calling this multiple times is safe; handlers are only added once.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(fmt=FORMAT, datefmt=DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file is not None:
        log_path = Path(log_file).expanduser().resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name)
