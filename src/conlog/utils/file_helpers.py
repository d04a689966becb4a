"""Shared file utilities for conlog.

Provides the log file handling used by both loggers:
- get_executable_name: Name of the running program, used for default log names
- resolve_log_path: Validate a log file name and make it absolute
- ensure_log_directory: Create missing parent directories
- remove_previous_log: Delete an existing file before overwriting
- open_log_writer: Open a buffered text writer in append or overwrite mode
"""

from __future__ import annotations

__all__ = [
    "ensure_log_directory",
    "get_executable_name",
    "open_log_writer",
    "remove_previous_log",
    "resolve_log_path",
]

import sys
from pathlib import Path
from typing import TextIO

from conlog.config import WriteMode
from conlog.constants import LOG_FILE_ENCODING
from conlog.exceptions import ConfigurationError, LogFileError
from conlog.utils.validation import has_invalid_path_chars

# argv[0] values that don't name a program (python -c / interactive)
_NON_PROGRAM_ARGV = ("", "-c", "-m")


def get_executable_name() -> str:
    """Get the file name of the running program.

    Uses the script named in sys.argv[0] (e.g. "backup.py" or "mytool" for
    a console script). Falls back to the interpreter's name when Python was
    started with -c or interactively.

    Returns:
        File name without directory (e.g., "backup.py").
    """
    argv0 = sys.argv[0] if sys.argv else ""
    if argv0 in _NON_PROGRAM_ARGV:
        return Path(sys.executable).name or "python"
    return Path(argv0).name


def resolve_log_path(file_name: str) -> Path:
    """Validate a log file name and resolve it to an absolute path.

    Relative names resolve against the current working directory.

    Args:
        file_name: Log file name or path, exactly as it should appear on disk.

    Returns:
        Absolute path to the log file.

    Raises:
        ConfigurationError: If file_name is empty or contains illegal characters.
    """
    if not file_name:
        raise ConfigurationError("Log filename is empty.")
    if has_invalid_path_chars(file_name):
        raise ConfigurationError(f"Logfile name or path contains invalid characters: {file_name!r}")
    return Path(file_name).expanduser().absolute()


def ensure_log_directory(log_path: Path) -> None:
    """Create the log file's parent directory if it doesn't exist.

    Raises:
        LogFileError: If the directory cannot be created.
    """
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise LogFileError(f"Cannot create log directory {log_path.parent}: {e}", log_path) from e


def remove_previous_log(log_path: Path) -> None:
    """Delete an existing log file so it can be recreated empty.

    Raises:
        LogFileError: If the file exists but cannot be deleted.
    """
    try:
        log_path.unlink(missing_ok=True)
    except OSError as e:
        raise LogFileError(f"Unable to delete previous logfile because: {e}", log_path) from e


def open_log_writer(log_path: Path, mode: WriteMode) -> TextIO:
    """Open a buffered text writer on a log file.

    Creates missing parent directories. OVERWRITE deletes any existing file
    first; APPEND keeps existing content and writes after it.

    Args:
        log_path: Absolute path to the log file.
        mode: How to treat an existing file.

    Returns:
        Open text writer. The caller owns it and must close it.

    Raises:
        LogFileError: If the directory, deletion or open fails.
    """
    ensure_log_directory(log_path)
    if mode is WriteMode.OVERWRITE:
        remove_previous_log(log_path)
    try:
        return open(log_path, "a", encoding=LOG_FILE_ENCODING)
    except OSError as e:
        raise LogFileError(f"Cannot open log file {log_path}: {e}", log_path) from e
