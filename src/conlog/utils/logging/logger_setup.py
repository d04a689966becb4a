"""Logger setup utilities for the network/console logger.

Provides factory functions for the handlers a SyslogLogger owns:
- SeveritySysLogHandler: SysLogHandler that knows the ALERT and EMERGENCY levels
- create_syslog_handler: UDP handler for a remote collector
- create_console_handler: Console echo handler
- create_file_handler: Plain-text file handler
- setup_syslog_logger: Non-propagating logger wired to the above
"""

from __future__ import annotations

__all__ = [
    "SeveritySysLogHandler",
    "create_console_handler",
    "create_file_handler",
    "create_syslog_handler",
    "setup_syslog_logger",
]

import logging
import socket
import sys
from logging.handlers import SysLogHandler
from pathlib import Path
from typing import TextIO

from conlog.constants import LOG_FILE_ENCODING
from conlog.exceptions import LogFileError
from conlog.utils.logging.formatters import ColorConsoleFormatter, ConsoleFormatter, FileFormatter
from conlog.utils.logging.levels import SYSLOG_PRIORITY_MAP


class SeveritySysLogHandler(SysLogHandler):
    """SysLogHandler mapping ALERT and EMERGENCY records to syslog alert/emerg.

    The stock priority_map has no entry for custom level names and would
    send them as "warning".
    """

    priority_map = SYSLOG_PRIORITY_MAP


def create_syslog_handler(host: str, port: int, app_name: str) -> SeveritySysLogHandler:
    """Create a UDP syslog handler for a remote collector.

    UDP needs no connection, so this succeeds even when nothing listens on
    host:port; datagrams are simply lost.

    Args:
        host: IPv4 address of the collector.
        port: UDP port of the collector.
        app_name: Sent as the syslog ident ("app_name: message").

    Returns:
        Configured handler at facility "user".
    """
    handler = SeveritySysLogHandler(
        address=(host, port),
        facility=SysLogHandler.LOG_USER,
        socktype=socket.SOCK_DGRAM,
    )
    handler.ident = f"{app_name}: "
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def create_console_handler(stream: TextIO | None = None) -> logging.StreamHandler[TextIO]:
    """Create the console echo handler.

    Level tags are coloured when the stream is a terminal.

    Args:
        stream: Target stream. Defaults to the current sys.stdout.
    """
    target = stream if stream is not None else sys.stdout
    handler = logging.StreamHandler(target)
    isatty = getattr(target, "isatty", None)
    if isatty is not None and isatty():
        handler.setFormatter(ColorConsoleFormatter())
    else:
        handler.setFormatter(ConsoleFormatter())
    return handler


def create_file_handler(log_path: Path) -> logging.FileHandler:
    """Create an append-mode file handler.

    Overwrite handling (deleting a previous file) is the caller's job; the
    handler itself always appends.

    Raises:
        LogFileError: If the log file cannot be opened.
    """
    try:
        handler = logging.FileHandler(log_path, mode="a", encoding=LOG_FILE_ENCODING)
    except OSError as e:
        raise LogFileError(f"Cannot open log file {log_path}: {e}", log_path) from e
    handler.setFormatter(FileFormatter())
    return handler


def setup_syslog_logger(
    logger_name: str,
    handlers: list[logging.Handler],
    log_level: int = logging.INFO,
) -> logging.Logger:
    """Set up a non-propagating logger with the given handlers.

    Args:
        logger_name: Name for the logger (e.g., "conlog.app.backup").
        handlers: Handlers to attach, already configured.
        log_level: Logging level (default: INFO).

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)
    logger.propagate = False  # Don't propagate to root logger

    # Close and remove any existing handlers to avoid duplicates and resource leaks
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    for handler in handlers:
        logger.addHandler(handler)

    return logger
