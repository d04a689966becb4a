"""File redirect logger for console applications.

Redirects sys.stdout / sys.stderr to log files and restores them on demand.
The write helpers send text to the log file and the original console stream
at the same time, whether or not the stream is currently redirected.

Example:
    >>> log = FileRedirectLogger()
    >>> log.init_output_log("logs/app", WriteMode.OVERWRITE)   # logs/app.log
    >>> log.write_line("Started with {0} workers", 4)          # file + console
    >>> log.set_output_redirect(True)
    >>> print("only in logs/app.log")
    >>> log.close()                                             # restores sys.stdout
"""

from __future__ import annotations

__all__ = ["FileRedirectLogger", "TeeWriter"]

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import Literal, TextIO

from conlog.config import WriteMode
from conlog.constants import ERROR_LOG_SUFFIX, LOG_FILE_EXTENSION
from conlog.exceptions import LoggerNotInitializedError
from conlog.utils.file_helpers import get_executable_name, open_log_writer, resolve_log_path
from conlog.utils.logging.system_logger import get_system_logger

StreamName = Literal["stdout", "stderr"]


class TeeWriter:
    """Text writer that forwards every write to several streams.

    Usage:
        tee = TeeWriter(log_file, sys.stdout)
        print("to both", file=tee)
    """

    def __init__(self, *sinks: TextIO) -> None:
        if not sinks:
            raise ValueError("TeeWriter needs at least one sink")
        self.sinks: tuple[TextIO, ...] = sinks

    def write(self, text: str) -> int:
        for sink in self.sinks:
            sink.write(text)
        return len(text)

    def writelines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write(line)

    def flush(self) -> None:
        for sink in self.sinks:
            sink.flush()

    def writable(self) -> bool:
        return True

    def isatty(self) -> bool:
        """True if any sink is a terminal."""
        return any(sink.isatty() for sink in self.sinks)


@dataclass
class _RedirectState:
    """Per-stream redirect state.

    Attributes:
        stream_name: Attribute of sys being redirected ("stdout" or "stderr").
        label: Name used in error messages ("Output", "Error").
        init_method: Initializer to mention in error messages.
        writer: File-backed writer, None until initialized.
        original: Stream captured before redirecting.
        tee: Writer over (writer, original) used by the write helpers.
        path: Resolved log file path.
        redirected: Whether sys.<stream_name> currently points at writer.
    """

    stream_name: StreamName
    label: str
    init_method: str
    writer: TextIO | None = None
    original: TextIO | None = None
    tee: TeeWriter | None = None
    path: Path | None = None
    redirected: bool = False

    def require_tee(self) -> TeeWriter:
        if self.tee is None:
            raise LoggerNotInitializedError(
                f"{self.label} logger uninitialized. Make sure to call {self.init_method}()!"
            )
        return self.tee


def _format(msg: str, args: tuple[object, ...]) -> str:
    # Plain variant writes msg untouched so literal braces survive
    return msg.format(*args) if args else msg


class FileRedirectLogger:
    """Logs stdout/stderr to files, optionally redirecting the streams.

    Each stream is independent: initialize it with init_output_log() or
    init_error_log() before redirecting or writing to it.
    """

    def __init__(self) -> None:
        self._output = _RedirectState("stdout", "Output", "init_output_log")
        self._error = _RedirectState("stderr", "Error", "init_error_log")

    # -------------------------------------------------------------------------
    # Initialization
    # -------------------------------------------------------------------------

    def init_output_log(
        self, file_name: str | None = None, mode: WriteMode = WriteMode.APPEND
    ) -> Path:
        """Initialize the output (stdout) logger.

        Args:
            file_name: Output file name; ".log" is always appended.
                Defaults to the executable name (e.g. "app.py" -> "app.py.log").
            mode: APPEND (default) or OVERWRITE.

        Returns:
            Absolute path of the log file.

        Raises:
            ConfigurationError: If the name is empty or has invalid characters.
            LogFileError: If the directory or file cannot be prepared.
        """
        if file_name is None:
            file_name = get_executable_name()
        return self._init_stream(self._output, file_name, mode)

    def init_error_log(
        self, file_name: str | None = None, mode: WriteMode = WriteMode.APPEND
    ) -> Path:
        """Initialize the error (stderr) logger.

        Args:
            file_name: Error file name; ".log" is always appended.
                Defaults to the executable name plus "_err" (e.g. "app.py_err.log").
            mode: APPEND (default) or OVERWRITE.

        Returns:
            Absolute path of the log file.

        Raises:
            ConfigurationError: If the name is empty or has invalid characters.
            LogFileError: If the directory or file cannot be prepared.
        """
        if file_name is None:
            file_name = get_executable_name() + ERROR_LOG_SUFFIX
        return self._init_stream(self._error, file_name, mode)

    def _init_stream(self, state: _RedirectState, file_name: str, mode: WriteMode) -> Path:
        # An empty name would otherwise become the hidden file ".log"
        log_path = resolve_log_path(file_name and file_name + LOG_FILE_EXTENSION)

        if not state.redirected:
            state.original = getattr(sys, state.stream_name)

        writer = open_log_writer(log_path, mode)
        previous = state.writer
        state.writer = writer
        state.path = log_path
        assert state.original is not None
        state.tee = TeeWriter(writer, state.original)

        if previous is not None:
            if state.redirected:
                get_system_logger().warning(
                    f"sys.{state.stream_name} re-initialized while redirected; now writing to {log_path}"
                )
                setattr(sys, state.stream_name, writer)
            previous.close()

        return log_path

    # -------------------------------------------------------------------------
    # Redirection
    # -------------------------------------------------------------------------

    def set_output_redirect(self, enabled: bool) -> None:
        """Redirect all console output (sys.stdout) to the output log file.

        Args:
            enabled: True to redirect, False to restore the original stream.

        Raises:
            LoggerNotInitializedError: If init_output_log() was never called.
        """
        self._set_redirect(self._output, enabled)

    def set_error_redirect(self, enabled: bool) -> None:
        """Redirect all console errors (sys.stderr) to the error log file.

        Args:
            enabled: True to redirect, False to restore the original stream.

        Raises:
            LoggerNotInitializedError: If init_error_log() was never called.
        """
        self._set_redirect(self._error, enabled)

    @staticmethod
    def _set_redirect(state: _RedirectState, enabled: bool) -> None:
        state.require_tee()
        if enabled and not state.redirected:
            setattr(sys, state.stream_name, state.writer)
            state.redirected = True
        elif not enabled and state.redirected:
            setattr(sys, state.stream_name, state.original)
            state.redirected = False

    @property
    def is_output_redirected(self) -> bool:
        return self._output.redirected

    @property
    def is_error_redirected(self) -> bool:
        return self._error.redirected

    @property
    def output_path(self) -> Path | None:
        """Output log file path, None until initialized."""
        return self._output.path

    @property
    def error_path(self) -> Path | None:
        """Error log file path, None until initialized."""
        return self._error.path

    # -------------------------------------------------------------------------
    # Writing (log file and original console)
    # -------------------------------------------------------------------------

    def write(self, msg: str, *args: object) -> None:
        """Write to the output log and the console. Args fill str.format fields."""
        self._output.require_tee().write(_format(msg, args))

    def write_line(self, msg: str, *args: object) -> None:
        """Like write(), followed by a newline."""
        self._output.require_tee().write(_format(msg, args) + "\n")

    def ewrite(self, msg: str, *args: object) -> None:
        """Write to the error log and the console's error stream."""
        self._error.require_tee().write(_format(msg, args))

    def ewrite_line(self, msg: str, *args: object) -> None:
        """Like ewrite(), followed by a newline."""
        self._error.require_tee().write(_format(msg, args) + "\n")

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Restore redirected streams and close the log files.

        Both streams return to the uninitialized state.
        """
        for state in (self._output, self._error):
            if state.redirected:
                setattr(sys, state.stream_name, state.original)
            if state.writer is not None:
                state.writer.close()
            state.writer = None
            state.tee = None
            state.redirected = False

    def __enter__(self) -> FileRedirectLogger:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
