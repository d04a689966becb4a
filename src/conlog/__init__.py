"""conlog: syslog/console and file-redirect logging for console applications.

Two independent loggers:
- SyslogLogger: severity-tagged messages to a syslog collector, the console
  and optionally a log file
- FileRedirectLogger: sys.stdout/sys.stderr to log files, mirrored to the console
"""

from __future__ import annotations

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "ConlogError",
    "FileLoggingMode",
    "FileRedirectLogger",
    "LogFileError",
    "LoggerNotInitializedError",
    "SyslogLogger",
    "SyslogLoggerConfig",
    "TeeWriter",
    "WriteMode",
    "__version__",
]

from conlog.config import FileLoggingMode, SyslogLoggerConfig, WriteMode
from conlog.exceptions import (
    ConfigurationError,
    ConlogError,
    LogFileError,
    LoggerNotInitializedError,
)
from conlog.file_logger import FileRedirectLogger, TeeWriter
from conlog.syslog_logger import SyslogLogger
