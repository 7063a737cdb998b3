"""
Logging helpers for htmlsoup.

Every module logs through ``logging.getLogger(__name__)``, so all records
land under the ``htmlsoup`` logger. The library never attaches handlers on
its own; applications (and debugging sessions) call ``setup_logging``.
"""

import logging
import os
import sys
import time
from typing import Optional

ROOT_LOGGER_NAME = "htmlsoup"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"


def level_value(name: str, fallback: int) -> int:
    """Translate a level name such as ``"warning"`` into its numeric value."""
    return LOG_LEVELS.get(name.upper(), fallback)


class LogFormatter(logging.Formatter):
    """Formatter that highlights the level name with ANSI colors."""

    RESET = '\033[0m'

    LEVEL_COLORS = {
        logging.DEBUG: '\033[34m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[31m\033[1m',
    }

    def __init__(self, colored: bool = True, *args, **kwargs):
        """
        Args:
            colored: Whether to color the level name; never on Windows consoles
            *args: Passed to ``logging.Formatter``
            **kwargs: Passed to ``logging.Formatter``
        """
        super().__init__(*args, **kwargs)
        self.colored = colored and sys.platform != 'win32'

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno)
        if not self.colored or color is None:
            return message

        # Only the first occurrence, the message text may repeat the level name
        return message.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)


def _console_handler(level: int, colored: bool) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(LogFormatter(colored=colored, fmt=CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    return handler


def _file_handler(log_file: str, level: int) -> logging.Handler:
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def setup_logging(log_file: Optional[str] = None,
                  console_level: str = "INFO",
                  file_level: str = "DEBUG",
                  component: Optional[str] = None,
                  colored: bool = True) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to an htmlsoup logger.

    Calling it again for the same component returns the logger unchanged.

    Args:
        log_file: Path of a log file; no file logging when None
        console_level: Level name for the console handler
        file_level: Level name for the file handler
        component: Sub-logger to configure, e.g. ``"dom"`` or ``"utils.network"``
        colored: Whether console output uses ANSI colors

    Returns:
        logging.Logger: The configured logger
    """
    name = f"{ROOT_LOGGER_NAME}.{component}" if component else ROOT_LOGGER_NAME
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    console = level_value(console_level, logging.INFO)
    logger.addHandler(_console_handler(console, colored))

    if log_file:
        to_file = level_value(file_level, logging.DEBUG)
        logger.addHandler(_file_handler(log_file, to_file))
        # The logger must let through whatever the more verbose handler wants
        logger.setLevel(min(console, to_file))
    else:
        logger.setLevel(console)

    return logger


def log_exception(logger: logging.Logger, exception: Exception,
                  message: str = "An exception occurred") -> None:
    """
    Log an exception at ERROR level together with its traceback.

    Args:
        logger: Logger to use
        exception: The exception, usually the one just caught
        message: Prefix for the log line
    """
    exc_info = (type(exception), exception, exception.__traceback__)
    logger.error(f"{message}: {exception}", exc_info=exc_info)


class OperationTimer:
    """
    Context manager that logs how long a block took, at DEBUG level.

        with OperationTimer(logger, "parse"):
            ...

    The duration in seconds is available as ``elapsed`` afterwards.
    """

    def __init__(self, logger: logging.Logger, operation: str):
        self.logger = logger
        self.operation = operation
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> 'OperationTimer':
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = time.perf_counter() - self._start
        if exc_type is None:
            self.logger.debug(f"{self.operation} took {self.elapsed:.4f} seconds")
