"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Dict, Optional

BUFF_SIZE = 900
MAX_FD = 10240


class LineReader:
    """Reads lines from descriptors, keeping unread data per descriptor.

    Each call reads at least one chunk, and keeps reading until a chunk
    holds a newline or the descriptor is exhausted. A NUL byte ends a
    chunk: what follows it in the same chunk is dropped.
    """

    def __init__(self, buffer_size: int = BUFF_SIZE, encoding: str = "utf-8") -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._buffer_size = buffer_size
        self._encoding = encoding
        self._pending: Dict[int, bytes] = {}

    def read_line(self, fd: int) -> Optional[str]:
        """The next line from ``fd`` without its newline, or ``None`` at the end.

        Raises ``ValueError`` for a descriptor out of range and ``OSError``
        when reading fails.
        """
        if not 0 <= fd < MAX_FD:
            raise ValueError(f"file descriptor {fd} out of range")
        while True:
            chunk = os.read(fd, self._buffer_size)
            if not chunk:
                break
            chunk = chunk.split(b"\0", 1)[0]
            self._pending[fd] = self._pending.get(fd, b"") + chunk
            if b"\n" in chunk:
                break
        pending = self._pending.get(fd, b"")
        if not pending:
            return None
        line, _, rest = pending.partition(b"\n")
        self._pending[fd] = rest
        return line.decode(self._encoding)


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[str]:
    """Read the next line from ``fd`` with a reader shared by all callers."""
    return _default_reader.read_line(fd)