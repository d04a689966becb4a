"""System logger for library diagnostics.

This module provides a singleton logger for conlog's own operational events
(e.g., re-initializing a redirected stream, closing a logger twice). It is
separate from the loggers conlog builds for applications.

Logging strategy:
- Console (stderr): WARNING and above only, so library chatter never mixes
  with application output. Lower levels reach handlers the application
  attaches to "conlog.system" itself.
"""

from __future__ import annotations

__all__ = ["get_system_logger"]

import logging
import sys

from conlog.constants import APP_NAME
from conlog.utils.logging.formatters import ConsoleFormatter

# Module-level singleton logger - created on first use
_system_logger: logging.Logger | None = None


def get_system_logger() -> logging.Logger:
    """Get the singleton system logger instance.

    Creates the logger on first call with a handler on the process's real
    stderr (sys.__stderr__), so redirecting sys.stderr never pulls
    diagnostics into the error log file.

    Returns:
        logging.Logger: Configured system logger instance.

    Example:
        >>> from conlog.utils.logging.system_logger import get_system_logger
        >>> get_system_logger().warning("stdout log re-initialized while redirected")
    """
    global _system_logger

    if _system_logger is not None:
        return _system_logger

    _system_logger = logging.getLogger(f"{APP_NAME}.system")
    _system_logger.setLevel(logging.DEBUG)
    _system_logger.propagate = False  # Don't propagate to root logger

    # Close and remove any existing handlers to avoid duplicates and resource leaks
    for handler in _system_logger.handlers:
        handler.close()
    _system_logger.handlers.clear()

    stderr_handler = logging.StreamHandler(sys.__stderr__ or sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(ConsoleFormatter())
    _system_logger.addHandler(stderr_handler)

    return _system_logger
