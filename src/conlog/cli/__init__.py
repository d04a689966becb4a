"""Command-line interface for conlog."""

from .main import cli

__all__ = ["cli"]
