"""Custom exceptions for conlog.

All failures are raised immediately to the caller; nothing is retried.

    - ConlogError: Base for every error raised by this package
    - ConfigurationError: Invalid address, port, app name or file name
    - LogFileError: Log directory or file could not be created/deleted/opened
    - LoggerNotInitializedError: Logger used before initialization or after close

Usage:
    from conlog.exceptions import ConfigurationError, LoggerNotInitializedError
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "ConlogError",
    "LogFileError",
    "LoggerNotInitializedError",
]

from pathlib import Path


class ConlogError(Exception):
    """Base exception for conlog."""


class ConfigurationError(ConlogError, ValueError):
    """Logger configuration is invalid.

    Raised when:
    - Host is not a well-formed IPv4 dotted quad
    - Port is outside 1-65535
    - App name contains characters not allowed in file names
    - Log file name is empty or contains illegal path characters
    """


class LogFileError(ConlogError, OSError):
    """A log file or its directory could not be prepared.

    Attributes:
        path: The path that failed, if known.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class LoggerNotInitializedError(ConlogError, RuntimeError):
    """A logging or write call was made on an uninitialized or closed logger."""
