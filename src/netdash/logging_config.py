"""
Logging configuration for netdash.

Console logging for interactive use, plus an optional rotating log file
with a more detailed layout.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


DEFAULT_LOG_PATH = Path.home() / ".netdash" / "logs" / "netdash.log"


class StructuredFormatter(logging.Formatter):
    """Pipe-separated formatter for easier log parsing."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "module_name"):
            record.module_name = record.module
        if not hasattr(record, "function_name"):
            record.function_name = record.funcName
        return super().format(record)


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
    enable_console: bool = True,
    enable_file: bool = False,
) -> logging.Logger:
    """
    Set up logging for netdash.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Custom log file path (defaults to ~/.netdash/logs/netdash.log)
        max_bytes: Maximum log file size before rotation
        backup_count: Number of backup log files to keep
        enable_console: Enable console logging
        enable_file: Enable file logging

    Returns:
        The configured ``netdash`` logger
    """
    logger = logging.getLogger("netdash")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logger.level)
        console_handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(console_handler)

    if enable_file:
        log_path = Path(log_file) if log_file else DEFAULT_LOG_PATH
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(StructuredFormatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)-24s | %(module_name)-12s | "
                "%(function_name)-20s | %(lineno)-4d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def configure_logging(debug: bool = False, log_file: str | None = None) -> logging.Logger:
    """
    Quick logging configuration used by the command line.

    Args:
        debug: Enable debug logging
        log_file: Also write to this file
    """
    from netdash.config import get_config

    level = "DEBUG" if debug else get_config().log_level
    return setup_logging(
        level=level,
        log_file=log_file,
        enable_console=True,
        enable_file=log_file is not None,
    )
