# -*- coding: utf-8 -*-
"""
errors.py - Failure kinds of the writer tool.

Every failure is terminal: it is logged once to the system log at error
severity, described on standard error, and ends the process with status 1.
"""

import os

USAGE_ARGS = "<file path> <text to write>"


def describe_os_error(exc: OSError) -> str:
    """Returns the text perror() would print for the given OS error."""
    if exc.strerror:
        return exc.strerror
    if exc.errno is not None:
        return os.strerror(exc.errno)
    return str(exc)


class WriterError(Exception):
    """Base class for terminal writer failures."""
    exit_code = 1

    def __init__(self, log_message: str, stderr_message: str):
        super().__init__(log_message)
        self.log_message = log_message
        self.stderr_message = stderr_message


class UsageError(WriterError):
    """Raised when the tool is not given exactly two arguments."""

    def __init__(self, prog: str):
        super().__init__(
            f"Error: Two arguments required: {USAGE_ARGS}",
            f"Usage: {prog} {USAGE_ARGS}",
        )
        self.prog = prog


class OpenError(WriterError):
    """Raised when the destination cannot be opened for writing."""

    def __init__(self, filepath: str, cause: OSError):
        super().__init__(
            f"Error: Could not open file '{filepath}' for writing",
            f"Error opening file: {describe_os_error(cause)}",
        )
        self.filepath = filepath
        self.cause = cause


class WriteError(WriterError):
    """Raised when the content could not be fully written."""

    def __init__(self, filepath: str, cause: OSError):
        super().__init__(
            f"Error: Could not write to file '{filepath}'",
            f"Error writing to file: {describe_os_error(cause)}",
        )
        self.filepath = filepath
        self.cause = cause
