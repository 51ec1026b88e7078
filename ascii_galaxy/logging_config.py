"""
Logging Configuration
Sets up the package logger. Stdout belongs to the animation, so the full log
goes to a file and only warnings and errors reach stderr.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from platformdirs import user_log_dir

from .constants import APP_NAME


def default_log_file() -> Path:
    """Per-user log location, e.g. ~/.local/state/ascii_galaxy/log/ascii_galaxy.log on Linux."""
    return Path(user_log_dir(APP_NAME)) / f"{APP_NAME}.log"


def setup_logging(level: int = logging.INFO, log_file: str | Path | None = None) -> logging.Logger:
    """
    Configures the logger for the 'ascii_galaxy' namespace.

    Args:
        level: Logging level for the file handler (e.g. logging.DEBUG).
        log_file: Optional path to write the full log to. Parent directories
            are created as needed.
    """
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    )

    # Console: problems only, on stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(max(level, logging.WARNING))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
    return logger
