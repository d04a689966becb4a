"""Logging utilities and helpers.

This package provides the stdlib logging plumbing for conlog:
- levels: ALERT and EMERGENCY levels and syslog severity mapping
- formatters: Console (coloured) and file formatters
- logger_setup: Factory for the network/console logger's handlers
- system_logger: Library diagnostics logger

Import directly from submodules to avoid circular imports:
    from conlog.utils.logging.logger_setup import setup_syslog_logger
"""

__all__: list[str] = []  # Direct submodule imports required (see docstring)
