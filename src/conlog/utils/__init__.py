"""Shared helpers for conlog: input validation, log file preparation, logging setup."""
