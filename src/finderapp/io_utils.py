# -*- coding: utf-8 -*-
"""
io_utils.py - Operator-facing stream output for the finderapp tools.

Messages meant for a human at the terminal go to standard error as plain
text. Everything that should outlive the terminal session goes to the
system log instead (see syslog_utils).
"""

import sys


def eprint(message: str):
    """
    Writes a single line of text to standard error, handling encoding.

    The line is encoded as UTF-8 with `surrogateescape` so that paths and
    text taken from the command line are echoed back with their original
    bytes. Streams without a `buffer` attribute (like io.StringIO in tests)
    receive the text directly.

    Args:
        message (str): The text to print. A newline is appended.
    """
    line = message + "\n"
    if hasattr(sys.stderr, 'buffer'):
        sys.stderr.flush()
        sys.stderr.buffer.write(line.encode('utf-8', 'surrogateescape'))
        sys.stderr.buffer.flush()
    else:
        sys.stderr.write(line)
