"""Configuration for conlog loggers.

Defines the enums shared by both loggers and the validated configuration
for the network/console logger.

Example usage:
    config = SyslogLoggerConfig(host="10.0.0.5", app_name="backup")
    logger = SyslogLogger(config)

    # Or validate from keyword arguments, converting errors
    config = build_syslog_config(host="10.0.0.5", port=514, app_name="backup")
"""

from __future__ import annotations

__all__ = [
    "FileLoggingMode",
    "SyslogLoggerConfig",
    "WriteMode",
    "build_syslog_config",
]

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from conlog.constants import DEFAULT_SYSLOG_PORT, MAX_PORT, MIN_PORT
from conlog.exceptions import ConfigurationError
from conlog.utils.validation import (
    has_invalid_filename_chars,
    has_invalid_path_chars,
    is_valid_ipv4,
)


class WriteMode(str, Enum):
    """How an existing log file is treated when opened."""

    APPEND = "append"
    OVERWRITE = "overwrite"


class FileLoggingMode(str, Enum):
    """Whether the network logger also writes records to a local file."""

    DISABLED = "disabled"
    SINGLE_FILE = "single_file"


class SyslogLoggerConfig(BaseModel):
    """Network/console logger configuration.

    Validated once at creation and immutable afterwards. The console echo
    flag here is only the initial value; the logger can toggle it later.

    Attributes:
        host: IPv4 address of the syslog collector.
        port: UDP port of the collector.
        app_name: Application name shown in every message and used as syslog ident.
        console_enable: Echo messages to the console.
        file_logging: Also write messages to a local log file.
        log_file_name: Log file name or path. None means "<executable>.log".
        overwrite: Delete an existing log file instead of appending to it.
    """

    model_config = ConfigDict(frozen=True)

    host: str
    port: int = Field(default=DEFAULT_SYSLOG_PORT, ge=MIN_PORT, le=MAX_PORT)
    app_name: str = Field(min_length=1)
    console_enable: bool = True
    file_logging: FileLoggingMode = FileLoggingMode.DISABLED
    log_file_name: str | None = None
    overwrite: bool = True

    @field_validator("host")
    @classmethod
    def validate_ipv4(cls, v: str) -> str:
        """Reject anything but an IPv4 dotted quad."""
        if not is_valid_ipv4(v):
            raise ValueError(f"Invalid IPv4 address: {v!r}")
        return v

    @field_validator("app_name")
    @classmethod
    def validate_app_name(cls, v: str) -> str:
        """App name must be usable as a file name."""
        if has_invalid_filename_chars(v):
            raise ValueError("App name includes invalid characters.")
        return v

    @field_validator("log_file_name")
    @classmethod
    def validate_log_file_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        if not v:
            raise ValueError("Log filename is empty.")
        if has_invalid_path_chars(v):
            raise ValueError("Logfile name or path contains invalid characters.")
        return v

    @property
    def write_mode(self) -> WriteMode | None:
        """Effective file mode: None (disabled), APPEND or OVERWRITE."""
        if self.file_logging is FileLoggingMode.DISABLED:
            return None
        return WriteMode.OVERWRITE if self.overwrite else WriteMode.APPEND


def build_syslog_config(**values: Any) -> SyslogLoggerConfig:
    """Validate keyword arguments into a SyslogLoggerConfig.

    Args:
        **values: SyslogLoggerConfig fields.

    Returns:
        Validated configuration.

    Raises:
        ConfigurationError: If any field fails validation. The message lists
            every failing field.
    """
    try:
        return SyslogLoggerConfig(**values)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            errors.append(f"  - {loc}: {error['msg']}")
        raise ConfigurationError("Invalid logger configuration:\n" + "\n".join(errors)) from e
