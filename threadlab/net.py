"""Helpers that open connected client sockets and listening server sockets."""

from __future__ import annotations

import socket

LISTENQ = 1024


class DnsError(OSError):
    """Raised when a host name cannot be resolved."""

    def __init__(self, hostname: str, reason: object = None) -> None:
        message = f"DNS error resolving {hostname!r}"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)
        self.hostname = hostname


def open_clientfd(hostname: str, port: int) -> socket.socket:
    """Open a TCP connection to ``hostname`` on ``port``.

    Raises :class:`DnsError` if the name cannot be resolved and
    :class:`OSError` if the connection fails.
    """
    try:
        address = socket.gethostbyname(hostname)
    except (socket.gaierror, socket.herror, UnicodeError) as exc:
        raise DnsError(hostname, exc) from exc
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.connect((address, port))
    except BaseException:
        sock.close()
        raise
    return sock


def open_listenfd(port: int) -> socket.socket:
    """Return a socket listening on ``port`` on every local IPv4 address."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(("", port))
        sock.listen(LISTENQ)
    except BaseException:
        sock.close()
        raise
    return sock