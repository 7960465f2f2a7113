"""Byte-buffer routines over mutable bytes-like objects.

Destinations are writable buffers such as ``bytearray`` or a writable
``memoryview``; sources may be any bytes-like object. Byte values are
reduced modulo 256, as the C routines convert them to ``unsigned char``.
Asking for more bytes than a buffer holds raises ``IndexError``.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
BytesLike = Union[bytes, bytearray, memoryview]


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")


def _check_span(buf: BytesLike, n: int, role: str) -> None:
    if n > len(buf):
        raise IndexError(f"{role} holds {len(buf)} bytes, {n} requested")


def memset(dest: Buffer, c: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``dest`` with ``c`` and return ``dest``."""
    _check_count(n)
    _check_span(dest, n, "destination")
    dest[:n] = bytes([c & 0xFF]) * n
    return dest


def bzero(dest: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``dest`` to zero."""
    memset(dest, 0, n)


def memcpy(dest: Optional[Buffer], src: Optional[BytesLike], n: int) -> Optional[Buffer]:
    """Copy ``n`` bytes from ``src`` into ``dest`` and return ``dest``.

    When both buffers are missing, nothing is done and ``None`` comes back.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_count(n)
    _check_span(src, n, "source")
    _check_span(dest, n, "destination")
    dest[:n] = bytes(src[:n])
    return dest


def memccpy(dest: Buffer, src: BytesLike, c: int, n: int) -> Optional[int]:
    """Copy bytes from ``src`` to ``dest`` up to and including byte ``c``.

    At most ``n`` bytes are copied. Returns the offset in ``dest`` just past
    the copied ``c``, or ``None`` when ``c`` was not among the first ``n``
    bytes (in which case all ``n`` bytes were copied).
    """
    _check_count(n)
    target = c & 0xFF
    window = bytes(src[:n])
    stop = window.find(target)
    count = n if stop < 0 else stop + 1
    _check_span(src, count, "source")
    _check_span(dest, count, "destination")
    dest[:count] = window[:count]
    return None if stop < 0 else count


def memmove(dest: Optional[Buffer], src: Optional[BytesLike], n: int) -> Optional[Buffer]:
    """Copy ``n`` bytes from ``src`` to ``dest``; the two may overlap.

    When both buffers are missing, nothing is done and ``None`` comes back.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memmove needs both a destination and a source")
    _check_count(n)
    _check_span(src, n, "source")
    _check_span(dest, n, "destination")
    # Taking a snapshot of the source first makes overlapping views safe.
    dest[:n] = bytes(src[:n])
    return dest


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` in the first ``n``
    bytes of ``data``, or ``None`` if there is none."""
    _check_count(n)
    _check_span(data, n, "buffer")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns 0 when they are equal, otherwise the difference between the
    first pair of bytes that differ (``a`` byte minus ``b`` byte).
    """
    _check_count(n)
    _check_span(a, n, "first buffer")
    _check_span(b, n, "second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memalloc(size: int) -> Optional[bytearray]:
    """Return a new zero-filled buffer of ``size`` bytes, or ``None`` for 0."""
    _check_count(size)
    if size == 0:
        return None
    return bytearray(size)


def memdel(buffer: Optional[bytearray]) -> None:
    """Release a buffer's contents; callers rebind their name to the result."""
    if buffer is not None:
        del buffer[:]
    return None