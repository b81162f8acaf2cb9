"""Logging configuration for applications using unitard."""

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None
) -> None:
    """
    Configure logging to stderr, and optionally to a file.

    unitard never calls this itself; it only logs through module loggers.

    Args:
        level: Logging level (default INFO)
        log_file: Optional path to a log file
        format_string: Optional custom format string
    """
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=format_string, handlers=handlers)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the unitard namespace.

    Helper for applications that want their deployment messages alongside
    unitard's own; the package itself logs through module loggers.
    """
    return logging.getLogger(f"unitard.{name}")
