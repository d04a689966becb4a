"""Syslog severity levels for stdlib logging.

stdlib logging stops at CRITICAL. Syslog has two more urgent severities,
alert and emerg, registered here as ALERT and EMERGENCY above CRITICAL.
"""

from __future__ import annotations

__all__ = [
    "ALERT",
    "EMERGENCY",
    "ERROR",
    "INFO",
    "SYSLOG_PRIORITY_MAP",
    "register_levels",
]

import logging

from conlog.constants import ALERT_LEVEL, EMERGENCY_LEVEL

ALERT = ALERT_LEVEL
EMERGENCY = EMERGENCY_LEVEL
ERROR = logging.ERROR
INFO = logging.INFO

# levelname -> syslog priority name (see SysLogHandler.priority_names)
SYSLOG_PRIORITY_MAP: dict[str, str] = {
    "DEBUG": "debug",
    "INFO": "info",
    "WARNING": "warning",
    "ERROR": "error",
    "CRITICAL": "critical",
    "ALERT": "alert",
    "EMERGENCY": "emerg",
}


def register_levels() -> None:
    """Register ALERT and EMERGENCY level names with logging. Idempotent."""
    logging.addLevelName(ALERT, "ALERT")
    logging.addLevelName(EMERGENCY, "EMERGENCY")


register_levels()
