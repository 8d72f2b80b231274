"""
Logging configuration for minicurl.

Diagnostics always go to stderr; stdout is reserved for response bodies.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler


class StructuredFormatter(logging.Formatter):
    """Structured formatter for easier log parsing."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, 'module_name'):
            record.module_name = record.module
        if not hasattr(record, 'function_name'):
            record.function_name = record.funcName

        return super().format(record)


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
    enable_console: bool = True,
    enable_file: bool = False,
) -> logging.Logger:
    """
    Set up logging for minicurl.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Custom log file path (defaults to ~/.minicurl/logs/minicurl.log)
        max_bytes: Maximum log file size before rotation
        backup_count: Number of backup log files to keep
        enable_console: Enable console logging on stderr
        enable_file: Enable file logging

    Returns:
        Configured package logger
    """
    logger = logging.getLogger("minicurl")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    logger.handlers.clear()

    console_fmt = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    file_fmt = StructuredFormatter(
        fmt='%(asctime)s | %(levelname)-8s | %(name)-20s | %(module_name)-15s | '
            '%(function_name)-20s | %(lineno)-4d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(console_fmt)
        logger.addHandler(console_handler)

    if enable_file:
        if log_file:
            log_path = Path(log_file)
        else:
            log_path = Path.home() / ".minicurl" / "logs" / "minicurl.log"

        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_fmt)
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def configure_logging(
    verbose: bool = False,
    debug: bool = False,
    default_level: str = "WARNING",
    log_file: str | None = None,
) -> logging.Logger:
    """
    Quick logging configuration for the command line.

    Args:
        verbose: Log request progress (INFO)
        debug: Log everything (DEBUG); wins over verbose
        default_level: Level used when neither flag is given
        log_file: Also write a rotating log file at this path
    """
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = default_level
    return setup_logging(
        level=level,
        log_file=log_file,
        enable_console=True,
        enable_file=log_file is not None,
    )
