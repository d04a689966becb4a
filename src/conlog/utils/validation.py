"""Validation utilities for conlog.

Provides reusable validation functions for configuration values.
"""

from __future__ import annotations

__all__ = [
    "has_invalid_filename_chars",
    "has_invalid_path_chars",
    "is_valid_ipv4",
    "is_valid_port",
]

from conlog.constants import (
    INVALID_FILENAME_CHARS,
    INVALID_PATH_CHARS,
    IPV4_PATTERN,
    MAX_PORT,
    MIN_PORT,
)


def is_valid_ipv4(address: str) -> bool:
    """Check if address is an IPv4 dotted quad.

    Args:
        address: Address string to validate (e.g., "192.168.1.10").

    Returns:
        True if address has four octets in the range 0-255.
    """
    return IPV4_PATTERN.fullmatch(address) is not None


def is_valid_port(port: int) -> bool:
    """Check if port is a usable UDP/TCP port number."""
    return MIN_PORT <= port <= MAX_PORT


def has_invalid_filename_chars(name: str) -> bool:
    """Check if name contains characters not allowed in a file name.

    Path separators count as invalid here: the name must be a single
    path component.
    """
    return any(c in INVALID_FILENAME_CHARS for c in name)


def has_invalid_path_chars(path: str) -> bool:
    """Check if path contains characters not allowed anywhere in a path."""
    return any(c in INVALID_PATH_CHARS for c in path)
