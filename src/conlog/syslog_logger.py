"""Network/console logger for console applications.

Sends severity-tagged messages to a remote syslog collector over UDP,
echoes them to the console, and optionally writes them to a log file.

Every message is formatted as:

    APP: <app name>
    MSG: <message>
    <LABEL>: <detail>        (only when a detail is given)

Example:
    >>> logger = SyslogLogger.create("10.0.0.5", 514, "backup")
    >>> logger.log_error("Nightly backup failed", "disk full")
    >>> logger.console_echo = False
    >>> logger.close()
"""

from __future__ import annotations

__all__ = ["SyslogLogger"]

import itertools
import logging
from pathlib import Path
from types import TracebackType

from conlog.config import FileLoggingMode, SyslogLoggerConfig, WriteMode, build_syslog_config
from conlog.constants import APP_NAME, LOG_FILE_EXTENSION
from conlog.exceptions import LoggerNotInitializedError
from conlog.utils.file_helpers import (
    ensure_log_directory,
    get_executable_name,
    remove_previous_log,
    resolve_log_path,
)
from conlog.utils.logging.levels import ALERT, EMERGENCY, ERROR, INFO
from conlog.utils.logging.logger_setup import (
    create_console_handler,
    create_file_handler,
    create_syslog_handler,
    setup_syslog_logger,
)
from conlog.utils.logging.system_logger import get_system_logger

# Distinguishes stdlib loggers of instances sharing an app name
_instance_counter = itertools.count(1)

_NOT_INITIALIZED = "Logger not initialized. Create it with SyslogLogger.create() before logging."


class SyslogLogger:
    """Logger forwarding to a syslog collector and the console.

    The instance owns one UDP syslog handler, one console handler (attached
    only while console echo is on) and, with file logging, one file handler.
    Each instance gets its own stdlib logger, unregistered again by close().
    Use as a context manager or call close() when done.
    """

    def __init__(self, config: SyslogLoggerConfig) -> None:
        """Build the logger from a validated configuration.

        Args:
            config: Validated configuration.

        Raises:
            ConfigurationError: If the log file name is invalid.
            LogFileError: If the log directory cannot be created, a previous log
                file cannot be deleted in overwrite mode, or the file cannot be opened.
        """
        self._config = config
        self._app_name = config.app_name
        self._log_path = self._prepare_log_file(config)

        # File first so a failed open leaves no syslog socket behind
        handlers: list[logging.Handler] = []
        if self._log_path is not None:
            handlers.append(create_file_handler(self._log_path))
        handlers.append(create_syslog_handler(config.host, config.port, config.app_name))

        self._console_handler = create_console_handler()
        self._logger_name = f"{APP_NAME}.app.{config.app_name}.{next(_instance_counter)}"
        self._logger: logging.Logger | None = setup_syslog_logger(self._logger_name, handlers)
        if config.console_enable:
            self._logger.addHandler(self._console_handler)

    @classmethod
    def create(
        cls,
        host: str,
        port: int,
        app_name: str,
        console_enable: bool = True,
        file_logging: FileLoggingMode = FileLoggingMode.DISABLED,
        log_file_name: str | None = None,
        overwrite: bool = True,
    ) -> SyslogLogger:
        """Validate settings and create a logger.

        Args:
            host: IPv4 address of the syslog collector.
            port: UDP port of the collector.
            app_name: Name of the app shown in every message.
            console_enable: Display logs in the console.
            file_logging: Also write logs to a file. Default: disabled.
            log_file_name: Log file name (if enabled), used as given.
                Defaults to the executable name plus ".log".
            overwrite: Delete an existing log file of the same name first.

        Returns:
            Ready-to-use logger.

        Raises:
            ConfigurationError: On an invalid address, port, app name or file name.
            LogFileError: If the log directory or log file can't be prepared or opened.
        """
        config = build_syslog_config(
            host=host,
            port=port,
            app_name=app_name,
            console_enable=console_enable,
            file_logging=file_logging,
            log_file_name=log_file_name,
            overwrite=overwrite,
        )
        return cls(config)

    @staticmethod
    def _prepare_log_file(config: SyslogLoggerConfig) -> Path | None:
        """Resolve, create the directory for, and optionally clear the log file."""
        write_mode = config.write_mode
        if write_mode is None:
            return None

        file_name = config.log_file_name
        if file_name is None:
            file_name = get_executable_name() + LOG_FILE_EXTENSION

        log_path = resolve_log_path(file_name)
        ensure_log_directory(log_path)
        if write_mode is WriteMode.OVERWRITE:
            remove_previous_log(log_path)
        return log_path

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def config(self) -> SyslogLoggerConfig:
        return self._config

    @property
    def app_name(self) -> str:
        return self._app_name

    @property
    def log_path(self) -> Path | None:
        """Absolute path of the log file, or None when file logging is disabled."""
        return self._log_path

    @property
    def is_closed(self) -> bool:
        return self._logger is None

    @property
    def console_echo(self) -> bool:
        """Whether calls to the logger are also shown in the console."""
        return self.get_console_echo()

    @console_echo.setter
    def console_echo(self, enabled: bool) -> None:
        self.set_console_echo(enabled)

    def get_console_echo(self) -> bool:
        """Return whether calls to the logger are also shown in the console.

        Raises:
            LoggerNotInitializedError: If the logger is closed.
        """
        logger = self._require_logger()
        return self._console_handler in logger.handlers

    def set_console_echo(self, enabled: bool) -> None:
        """Enable or disable displaying logs in the console.

        Raises:
            LoggerNotInitializedError: If the logger is closed.
        """
        logger = self._require_logger()
        if enabled:
            logger.addHandler(self._console_handler)  # no-op if already attached
        else:
            logger.removeHandler(self._console_handler)

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------

    def log_emergency(self, msg: str, error: str | None = None) -> None:
        """Log message, with an optional detailed error string. (Severity: Emergency)"""
        self._log(EMERGENCY, msg, "ERROR", error)

    def log_error(self, msg: str, error: str | None = None) -> None:
        """Log message, with an optional detailed error string. (Severity: Error)"""
        self._log(ERROR, msg, "ERROR", error)

    def log_alert(self, msg: str, alert: str | None = None) -> None:
        """Log message, with an optional alert detail. (Severity: Alert)"""
        self._log(ALERT, msg, "ALERT", alert)

    def log_info(self, msg: str, info: str | None = None) -> None:
        """Log message, with an optional detail. (Severity: Info)"""
        self._log(INFO, msg, "INFO", info)

    def format_message(self, msg: str, label: str | None = None, detail: str | None = None) -> str:
        """Build the text sent for a message.

        Args:
            msg: The message.
            label: Detail label (e.g., "ERROR"). Ignored without a detail.
            detail: Optional detail string.

        Returns:
            "APP: <name>\\nMSG: <msg>", plus "\\n<label>: <detail>" with a detail.
        """
        text = f"APP: {self._app_name}\nMSG: {msg}"
        if detail is not None and label is not None:
            text += f"\n{label}: {detail}"
        return text

    def _log(self, level: int, msg: str, label: str, detail: str | None) -> None:
        logger = self._require_logger()
        # No args: the text is passed through without %-formatting
        logger.log(level, self.format_message(msg, label, detail))

    def _require_logger(self) -> logging.Logger:
        if self._logger is None:
            raise LoggerNotInitializedError(_NOT_INITIALIZED)
        return self._logger

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Close the syslog socket and log file. Further calls raise."""
        if self._logger is None:
            get_system_logger().debug(f"Logger for {self._app_name!r} already closed")
            return

        for handler in self._logger.handlers:
            handler.close()
        self._logger.handlers.clear()
        self._console_handler.close()
        # Per-instance logger names are never reused; drop ours from the registry
        logging.Logger.manager.loggerDict.pop(self._logger_name, None)
        self._logger = None

    def __enter__(self) -> SyslogLogger:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._logger is None else "open"
        return (
            f"SyslogLogger(app_name={self._app_name!r}, "
            f"host={self._config.host!r}, port={self._config.port}, {state})"
        )
