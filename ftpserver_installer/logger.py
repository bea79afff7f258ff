# Path and File Name : /home/ftpserver/installer/ftpserver_installer/logger.py
# Author: nXxBku0CKFAJCBN3X1g3bQk7OxYQylg8CMw1iGsq7gU
# Details of functionality of this file: Console and file logging for the installer with a SUCCESS level

"""
Installer logging.

Two sinks on one named logger:
- console: colored "[LEVEL] message"
- file:    "[YYYY-MM-DD HH:MM:SS] [LEVEL] message" (append-only, no rotation)
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "ftpserver_installer"

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

FILE_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVEL_COLORS = {
    "INFO": "\033[34m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
}
RESET = "\033[0m"


class ConsoleFormatter(logging.Formatter):
    """Formats console records as a colored level tag followed by the message."""

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        if self.use_color and level in LEVEL_COLORS:
            return f"{LEVEL_COLORS[level]}[{level}]{RESET} {message}"
        return f"[{level}] {message}"


def setup_logging(log_file: Path, stream=None) -> logging.Logger:
    """
    Configure the installer logger with a console and a file handler.

    Safe to call more than once: existing handlers are closed and replaced,
    so the latest log file wins.

    Args:
        log_file: Append-only log file path (parent created if missing)
        stream: Console stream (defaults to sys.stdout)

    Returns:
        Configured logger
    """
    log_file = Path(log_file)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_stream = stream if stream is not None else sys.stdout
    console_handler = logging.StreamHandler(console_stream)
    console_handler.setFormatter(ConsoleFormatter(use_color=_is_tty(console_stream)))

    logger.addHandler(console_handler)

    # Unprivileged runs cannot open /var/log; console sink only
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as e:
        logger.warning(f"Cannot write log file {log_file}: {e}")
        return logger

    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(file_handler)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the installer logger or one of its children."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


def _is_tty(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # closed stream
        return False
