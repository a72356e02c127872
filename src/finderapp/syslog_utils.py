# -*- coding: utf-8 -*-
"""
syslog_utils.py - Access to the system log for the finderapp tools.

Records are sent through the standard logging package to the local syslog
daemon, tagged with a program identifier and the calling process ID, e.g.

    writer[4242]: Writing 'hello' to '/tmp/out.txt'
"""

import logging
import logging.handlers
import os
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple, Union

SYSLOG_IDENT = "writer"
SYSLOG_FACILITY = logging.handlers.SysLogHandler.LOG_USER
SYSLOG_SOCKETS = ("/dev/log", "/var/run/syslog")
SYSLOG_UDP_FALLBACK = ("localhost", logging.handlers.SYSLOG_UDP_PORT)

logger = logging.getLogger(__name__)

Address = Union[str, Tuple[str, int]]


def resolve_syslog_address() -> Address:
    """Returns the local syslog socket, or the UDP port if no socket exists."""
    for path in SYSLOG_SOCKETS:
        if os.path.exists(path):
            return path
    return SYSLOG_UDP_FALLBACK


class SyslogFormatter(logging.Formatter):
    """
    Formatter that prefixes each record with `ident[pid]: `.

    Command-line arguments that are not valid UTF-8 arrive as
    surrogate-escaped strings, which the handler cannot encode. Their
    original bytes are rendered as backslash escapes instead.
    """

    def __init__(self, ident: str = SYSLOG_IDENT):
        super().__init__(f"{ident}[%(process)d]: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        return line.encode('utf-8', 'surrogateescape').decode('utf-8', 'backslashreplace')


def syslog_formatter(ident: str = SYSLOG_IDENT) -> logging.Formatter:
    return SyslogFormatter(ident)


def create_syslog_handler(address: Address) -> logging.Handler:
    """
    Returns a SysLogHandler connected to `address`.

    Like openlog(), an unreachable daemon is not an error: records are
    dropped by a NullHandler instead.
    """
    try:
        handler = logging.handlers.SysLogHandler(
            address=address,
            facility=SYSLOG_FACILITY,
        )
    except OSError as e:
        logger.debug(f"System log at {address!r} is unreachable: {e}")
        return logging.NullHandler()

    sock = getattr(handler, 'socket', None)
    if handler.unixsocket and (sock is None or sock.fileno() == -1):
        # 3.11+ ignores connection errors and leaves the socket unset or closed
        logger.debug(f"System log at {address!r} is unreachable")
        handler.close()
        return logging.NullHandler()

    return handler


@contextmanager
def open_syslog(
    ident: str = SYSLOG_IDENT,
    address: Optional[Address] = None,
    level: int = logging.DEBUG,
) -> Iterator[logging.Logger]:
    """
    Opens the system log for the duration of a `with` block.

    The yielded logger does not propagate to the root logger, so records end
    up only in the system log. The handler is detached and closed when the
    block exits, whether normally or through an exception.

    Args:
        ident (str): Program identifier attached to every record.
        address: Unix socket path or (host, port). Resolved automatically
            when omitted.
        level (int): Minimum severity forwarded to the daemon.

    Yields:
        logging.Logger: Logger bound to the system log.
    """
    if address is None:
        address = resolve_syslog_address()

    handler = create_syslog_handler(address)
    handler.setFormatter(syslog_formatter(ident))
    handler.setLevel(level)

    syslog = logging.getLogger(f"finderapp.{ident}")
    syslog.setLevel(level)
    syslog.propagate = False
    syslog.addHandler(handler)
    logger.debug(f"Opened system log '{ident}' at {address!r}")
    try:
        yield syslog
    finally:
        syslog.removeHandler(handler)
        handler.close()
