"""Robust I/O: unbuffered and buffered reads and writes on file descriptors.

The unbuffered functions transfer data directly between a descriptor and
memory, retrying after signal interruptions and stopping only at end of
file. :class:`RioBuffer` adds an internal buffer so that text lines and
fixed-size records can be read efficiently, and the two can be mixed on
the same descriptor.
"""

from __future__ import annotations

import os
from typing import Protocol, Union

RIO_BUFSIZE = 8192
MAXLINE = 8192
MAXBUF = 8192


class _HasFileno(Protocol):
    def fileno(self) -> int: ...


Descriptor = Union[int, _HasFileno]


def _fileno(fd: Descriptor) -> int:
    return fd if isinstance(fd, int) else fd.fileno()


def _read_once(fd: int, size: int) -> bytes:
    """Read up to ``size`` bytes, retrying when interrupted by a signal."""
    while True:
        try:
            return os.read(fd, size)
        except InterruptedError:
            continue


def rio_readn(fd: Descriptor, n: int) -> bytes:
    """Read up to ``n`` bytes from ``fd`` without buffering.

    Fewer bytes are returned only when end of file is reached first.
    """
    if n < 0:
        raise ValueError("byte count must not be negative")
    fd = _fileno(fd)
    chunks: list[bytes] = []
    remaining = n
    while remaining > 0:
        chunk = _read_once(fd, remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def rio_writen(fd: Descriptor, data: bytes) -> int:
    """Write all of ``data`` to ``fd`` and return the number of bytes written."""
    fd = _fileno(fd)
    view = memoryview(data)
    while view:
        try:
            written = os.write(fd, view)
        except InterruptedError:
            continue
        if written <= 0:
            raise OSError("write made no progress")
        view = view[written:]
    return len(data)


class RioBuffer:
    """A read buffer bound to one descriptor."""

    def __init__(self, fd: Descriptor) -> None:
        self.fd = _fileno(fd)
        self._buf = b""
        self._pos = 0

    def _unread(self) -> int:
        return len(self._buf) - self._pos

    def _fill(self) -> bool:
        """Refill the internal buffer if empty; return False at end of file."""
        if self._unread() > 0:
            return True
        data = _read_once(self.fd, RIO_BUFSIZE)
        self._buf = data
        self._pos = 0
        return bool(data)

    def _take(self, count: int) -> bytes:
        chunk = self._buf[self._pos:self._pos + count]
        self._pos += len(chunk)
        return chunk

    def readnb(self, n: int) -> bytes:
        """Read up to ``n`` bytes, short only at end of file."""
        if n < 0:
            raise ValueError("byte count must not be negative")
        chunks: list[bytes] = []
        remaining = n
        while remaining > 0 and self._fill():
            chunk = self._take(min(remaining, self._unread()))
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def readlineb(self, maxlen: int = MAXLINE) -> bytes:
        """Read a line of at most ``maxlen - 1`` bytes, newline included.

        Returns ``b""`` at end of file when nothing was read.
        """
        limit = maxlen - 1
        chunks: list[bytes] = []
        total = 0
        while total < limit and self._fill():
            window = min(limit - total, self._unread())
            end = self._buf.find(b"\n", self._pos, self._pos + window)
            if end >= 0:
                chunks.append(self._take(end - self._pos + 1))
                break
            chunk = self._take(window)
            chunks.append(chunk)
            total += len(chunk)
        return b"".join(chunks)

    def __iter__(self):
        """Yield lines until end of file."""
        while line := self.readlineb():
            yield line