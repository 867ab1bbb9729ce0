"""Line-by-line reading from raw file descriptors."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 1024
FOPEN_MAX = 16

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class LineReader:
    """Reads lines from a file descriptor, keeping what follows each line.

    Each line keeps its trailing newline; a last line without one is
    returned as it is. At end of input :meth:`next_line` returns None, but a
    later call reads again, so data written afterwards is still seen.
    """

    def __init__(self, fd: int) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        self.fd = fd
        self._rest = bytearray()

    def _take(self, end: int) -> str:
        line = bytes(self._rest[:end])
        del self._rest[:end]
        return line.decode(_ENCODING, _ERRORS)

    def next_line(self) -> str | None:
        """The next line, or None when nothing is left to read."""
        newline = self._rest.find(b"\n")
        while newline == -1:
            chunk = os.read(self.fd, BUFFER_SIZE)
            if not chunk:
                if not self._rest:
                    return None
                return self._take(len(self._rest))
            found = chunk.find(b"\n")
            if found != -1:
                newline = len(self._rest) + found
            self._rest += chunk
        return self._take(newline + 1)

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> str | None:
    """Next line from ``fd``, sharing its leftover input between calls.

    Only descriptors from 0 to ``FOPEN_MAX - 1`` are accepted.
    """
    if not 0 <= fd < FOPEN_MAX:
        raise ValueError(f"file descriptor out of range: {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    return reader.next_line()