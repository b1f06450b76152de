"""Centralized logging configuration for romset-cleaner.

This module sets up the application's root logger with optional file
rotation and console output. Console logs go to stderr so the report
printed on stdout stays clean.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path

from romcleaner.shared.constants import Logging


def setup_logging(
    log_file: str | Path | None = None,
    log_level: str = Logging.DEFAULT_LEVEL,
    log_max_bytes: int = Logging.MAX_BYTES,
    log_backup_count: int = Logging.BACKUP_COUNT,
    console_level: int = logging.WARNING,
    fmt: str = Logging.FORMAT,
) -> None:
    """Set up the application's root logger.

    Args:
        log_file: Path to the log file. No file logging when None.
        log_level: Root logging level name.
        log_max_bytes: Maximum size of log file before rotation.
        log_backup_count: Number of backup files to keep.
        console_level: Minimum level for the stderr handler.
        fmt: Log record format.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(fmt=fmt, datefmt=Logging.DATE_FORMAT)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=str(log_path),
            maxBytes=log_max_bytes,
            backupCount=log_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
