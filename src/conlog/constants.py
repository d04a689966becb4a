"""Application-wide constants for conlog.

Constants that define library behavior.
For per-logger settings, see config.py.
"""

import re

__all__ = [
    # Application identity
    "APP_NAME",
    # Log file naming
    "LOG_FILE_EXTENSION",
    "ERROR_LOG_SUFFIX",
    "LOG_FILE_ENCODING",
    # Validation
    "IPV4_PATTERN",
    "INVALID_FILENAME_CHARS",
    "INVALID_PATH_CHARS",
    # Syslog
    "DEFAULT_SYSLOG_PORT",
    "MIN_PORT",
    "MAX_PORT",
    "ALERT_LEVEL",
    "EMERGENCY_LEVEL",
    # Formatting
    "FILE_LOG_FORMAT",
]

# =============================================================================
# Application identity
# =============================================================================

APP_NAME = "conlog"

# =============================================================================
# Log file naming
# =============================================================================

LOG_FILE_EXTENSION = ".log"

# Appended to the executable name for the default error log (app_err.log)
ERROR_LOG_SUFFIX = "_err"

LOG_FILE_ENCODING = "utf-8"

# =============================================================================
# Validation
# =============================================================================

# Dotted quad, each octet 0-255 (leading zeros tolerated, e.g. "010")
IPV4_PATTERN = re.compile(
    r"((25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
)

_CONTROL_CHARS = frozenset(chr(i) for i in range(32))

# Characters no platform accepts in a single file name component
INVALID_FILENAME_CHARS: frozenset[str] = frozenset('<>:"/\\|?*') | _CONTROL_CHARS

# Characters rejected anywhere in a path (separators and drive colons allowed)
INVALID_PATH_CHARS: frozenset[str] = frozenset('<>"|?*') | _CONTROL_CHARS

# =============================================================================
# Syslog
# =============================================================================

DEFAULT_SYSLOG_PORT = 514
MIN_PORT = 1
MAX_PORT = 65535

# Custom levels above CRITICAL (50) so syslog severities keep their ordering
ALERT_LEVEL = 55
EMERGENCY_LEVEL = 60

# =============================================================================
# Formatting
# =============================================================================

FILE_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
