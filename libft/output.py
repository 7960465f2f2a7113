"""Writing characters, strings and numbers to file descriptors.

Output goes straight to the descriptor with ``os.write``, unbuffered, so
it interleaves with other writers the way the C routines do. A ``'\\0'``
character ends a string, as the terminator does in C.
"""

from __future__ import annotations

import os
from typing import Optional, Union

from libft.cstrings import strlen
from libft.numbers import itoa

STDOUT = 1

CharLike = Union[int, str]


def _write(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _byte(c: CharLike) -> bytes:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        code = ord(c)
        if code > 0xFF:
            raise ValueError(f"character {c!r} does not fit in one byte")
        return bytes([code])
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return bytes([c & 0xFF])


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write one byte to ``fd``; integers are reduced modulo 256."""
    _write(fd, _byte(c))


def putchar(c: CharLike) -> None:
    """Write one byte to standard output."""
    putchar_fd(c, STDOUT)


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` up to its terminator to ``fd`` as UTF-8; ``None`` writes nothing."""
    if s is None:
        return
    _write(fd, s[: strlen(s)].encode("utf-8"))


def putstr(s: Optional[str]) -> None:
    """Write ``s`` to standard output."""
    putstr_fd(s, STDOUT)


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` and a newline to ``fd``; ``None`` writes nothing at all."""
    if s is None:
        return
    putstr_fd(s, fd)
    putchar_fd("\n", fd)


def putendl(s: Optional[str]) -> None:
    """Write ``s`` and a newline to standard output.

    A missing string still produces the newline.
    """
    putstr(s)
    putchar("\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write a signed 32-bit integer in decimal to ``fd``."""
    _write(fd, itoa(n).encode("ascii"))


def putnbr(n: int) -> None:
    """Write a signed 32-bit integer in decimal to standard output."""
    putnbr_fd(n, STDOUT)