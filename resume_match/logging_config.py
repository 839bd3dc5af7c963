"""
Logging configuration for resume_match.

Provides coloured console output, optional rotating log files and a
timing context manager for analysis runs.
"""

import os
import sys
import logging
import logging.handlers
from datetime import datetime
from typing import Optional

# Default log directory (relative to the working directory)
LOG_DIR = os.path.join(os.getcwd(), 'logs')

LOGGER_PREFIX = 'resume_match'


class ColoredFormatter(logging.Formatter):
    """Formatter that adds colors to console output."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[41m',  # Red background
    }
    RESET = '\033[0m'

    def format(self, record):
        # Colour a copy so other handlers keep the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, '')
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(
    level: int = logging.INFO,
    log_to_file: bool = False,
    log_to_console: bool = True,
    log_dir: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for the resume_match package.

    Args:
        level: Logging level (default: INFO)
        log_to_file: Enable file logging with rotation
        log_to_console: Enable console logging (stderr)
        log_dir: Directory for log files (default: ./logs)

    Returns:
        Configured package logger
    """
    log_dir = log_dir or LOG_DIR
    if log_to_file and not os.path.exists(log_dir):
        os.makedirs(log_dir)

    package_logger = logging.getLogger(LOGGER_PREFIX)
    package_logger.setLevel(level)

    # Clear existing handlers
    package_logger.handlers.clear()

    # Format strings
    console_format = '%(asctime)s %(levelname)s [%(name)s] %(message)s'
    file_format = '%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)

        # Use colored formatter if terminal supports it
        if sys.stderr.isatty():
            formatter = ColoredFormatter(console_format, datefmt=date_format)
        else:
            formatter = logging.Formatter(console_format, datefmt=date_format)

        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)

    if log_to_file:
        main_log = os.path.join(log_dir, 'resume_match.log')
        file_handler = logging.handlers.RotatingFileHandler(
            main_log,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding='utf-8',
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(file_format, datefmt=date_format))
        package_logger.addHandler(file_handler)

        # Error-only log file
        error_log = os.path.join(log_dir, 'errors.log')
        error_handler = logging.handlers.RotatingFileHandler(
            error_log,
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=3,
            encoding='utf-8',
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(logging.Formatter(file_format, datefmt=date_format))
        package_logger.addHandler(error_handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger namespaced under the package logger.

    Args:
        name: Component name (e.g., 'cli', 'analysis')
    """
    return logging.getLogger(f'{LOGGER_PREFIX}.{name}')


class AnalysisLogContext:
    """Context manager for logging an operation with timing."""

    def __init__(self, logger: logging.Logger, operation: str = 'analysis'):
        self.logger = logger
        self.operation = operation
        self.start_time = None
        self.duration = None

    def __enter__(self):
        self.start_time = datetime.now()
        self.logger.info(f"Starting {self.operation}...")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is None:
            self.logger.info(f"Completed {self.operation} in {self.duration:.2f}s")
        else:
            self.logger.error(f"Failed {self.operation} after {self.duration:.2f}s: {exc_val}")

        return False  # Don't suppress exceptions
