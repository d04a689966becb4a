"""Log formatters for console and file output."""

from __future__ import annotations

__all__ = ["ColorConsoleFormatter", "ConsoleFormatter", "FileFormatter"]

import logging

import click

from conlog.constants import FILE_LOG_FORMAT

# levelname -> click.style kwargs
_LEVEL_STYLES: dict[str, dict[str, object]] = {
    "DEBUG": {"dim": True},
    "INFO": {"fg": "green"},
    "WARNING": {"fg": "yellow"},
    "ERROR": {"fg": "red"},
    "CRITICAL": {"fg": "red", "bold": True},
    "ALERT": {"fg": "magenta", "bold": True},
    "EMERGENCY": {"fg": "white", "bg": "red", "bold": True},
}


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for console output.

    Format: "LEVEL: message"
    """

    def format(self, record: logging.LogRecord) -> str:
        return f"{record.levelname}: {record.getMessage()}"


class ColorConsoleFormatter(ConsoleFormatter):
    """ConsoleFormatter with the level tag coloured by severity.

    Only attach to handlers writing to a terminal; the ANSI codes are
    written as-is.
    """

    def format(self, record: logging.LogRecord) -> str:
        style = _LEVEL_STYLES.get(record.levelname, {})
        tag = click.style(f"{record.levelname}:", **style)  # type: ignore[arg-type]
        return f"{tag} {record.getMessage()}"


class FileFormatter(logging.Formatter):
    """Plain-text formatter for log files.

    Format: "2025-12-04 10:48:37,123 LEVEL message"
    """

    def __init__(self) -> None:
        super().__init__(FILE_LOG_FORMAT)
