#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
writer.py - A tool to overwrite a file with a given text.

Usage:
    writer <file path> <text to write>

Args:
    file path: Destination file. Truncated if it exists, created otherwise.
        Its parent directory must already exist.
    text to write: Written verbatim, without a trailing newline.

Returns:
    Exit status 0 on success and 1 on any failure. Failures are described
    on stderr; the outcome is always recorded in the system log under the
    identifier 'writer'.
"""

import logging
import os
import sys
from typing import List, Optional

from finderapp.errors import OpenError, UsageError, WriteError, WriterError
from finderapp.io_utils import eprint
from finderapp.syslog_utils import open_syslog

logger = logging.getLogger(__name__)


def write_text(filepath: str, text: str) -> None:
    """
    Overwrites `filepath` with `text`.

    The text is written as the exact bytes it arrived with on the command
    line; it is never treated as a format string.

    Raises:
        OpenError: If the file cannot be opened for writing.
        WriteError: If the text cannot be fully written.
    """
    data = os.fsencode(text)

    try:
        handle = open(filepath, 'wb')
    except OSError as e:
        raise OpenError(filepath, e) from e

    try:
        with handle:
            written = handle.write(data)
            if written != len(data):
                raise OSError(0, f"short write ({written} of {len(data)} bytes)")
    except OSError as e:
        raise WriteError(filepath, e) from e


def _run(argv: List[str], log) -> int:
    try:
        if len(argv) != 3:
            raise UsageError(argv[0] if argv else "writer")

        filepath, text = argv[1], argv[2]
        write_text(filepath, text)
        log.debug("Writing '%s' to '%s'", text, filepath)
        return 0

    except WriterError as e:
        log.error("%s", e.log_message)
        eprint(e.stderr_message)
        return e.exit_code


def main(argv: Optional[List[str]] = None, log=None) -> int:
    """
    Main function to overwrite a file with the given text.

    Args:
        argv: Full argument vector including the program name.
            Defaults to sys.argv.
        log: Logger-like object with `error` and `debug` methods. The
            system log is used when omitted.

    Returns:
        int: The process exit status.
    """
    if argv is None:
        argv = sys.argv

    if log is not None:
        return _run(argv, log)

    with open_syslog() as syslog:
        return _run(argv, syslog)


def run():
    try:
        sys.exit(main())
    except Exception:
        logger.exception("An unexpected error occurred in writer.")
        sys.exit(1)


if __name__ == "__main__":
    run()
