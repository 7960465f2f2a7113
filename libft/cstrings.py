"""Operations on NUL-terminated strings.

Strings are ordinary ``str`` values. A ``'\\0'`` character ends the string
the way the terminator does in C: everything after it is ignored by every
routine here. Functions that write into a destination in C return the new
value instead. Functions that return a pointer into the string in C return
an index, or ``None`` where C returns a null pointer.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _c(s: str) -> str:
    """The part of ``s`` before its first terminator."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c)


def _at(s: str, i: int) -> int:
    """Character code at ``i``, or 0 past the end, as a C string reads."""
    return ord(s[i]) if i < len(s) else 0


def strlen(s: str) -> int:
    """Number of characters before the terminator."""
    return len(_c(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or ``None``.

    Searching for the terminator itself finds it at ``strlen(s)``.
    """
    text = _c(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or ``None``.

    Searching for the terminator itself finds it at ``strlen(s)``.
    """
    text = _c(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first pair of differing characters, or 0."""
    return strncmp(s1, s2, max(strlen(s1), strlen(s2)) + 1)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; 0 when they agree."""
    a, b = _c(s1), _c(s2)
    for i in range(n):
        x, y = _at(a, i), _at(b, i)
        if x != y:
            return x - y
        if x == 0:
            break
    return 0


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle``, or ``None``.

    An empty needle is found at index 0.
    """
    hay, pattern = _c(haystack), _c(needle)
    if not pattern:
        return 0
    index = hay.find(pattern)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Like :func:`strstr`, but the match must lie within the first
    ``length`` characters of ``haystack``."""
    hay, pattern = _c(haystack), _c(needle)
    if not pattern:
        return 0
    if length <= 0 or len(pattern) > length:
        return None
    index = hay.find(pattern, 0, length)
    return None if index < 0 else index


def strequ(s1: Optional[str], s2: Optional[str]) -> bool:
    """True when both strings are present and equal."""
    return s1 is not None and s2 is not None and strcmp(s1, s2) == 0


def strnequ(s1: Optional[str], s2: Optional[str], n: int) -> bool:
    """True when both strings are present and their first ``n`` characters,
    terminator included, are equal."""
    if s1 is None or s2 is None:
        return False
    a, b = _c(s1) + _NUL, _c(s2) + _NUL
    return a[:n] == b[:n]


def strcpy(dest: str, src: str) -> str:
    """The value ``dest`` holds after ``src`` is copied over it."""
    del dest
    return _c(src)


def strncpy(dest: str, src: str, n: int) -> str:
    """Overwrite the first ``n`` characters of ``dest`` with ``src``.

    When ``src`` is shorter than ``n`` the rest of those ``n`` characters
    become terminators; characters of ``dest`` past ``n`` are kept.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    head = _c(src)[:n].ljust(n, _NUL)
    return head + dest[n:]


def strcat(dest: str, src: str) -> str:
    """``dest`` with ``src`` appended."""
    return _c(dest) + _c(src)


def strncat(dest: str, src: str, n: int) -> str:
    """``dest`` with at most ``n`` characters of ``src`` appended."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    return _c(dest) + _c(src)[:n]


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` in a buffer of ``size`` characters.

    Returns the new contents of ``dest`` and the length the full
    concatenation would have had. When ``dest`` already fills the buffer it
    is left alone and the reported length is ``size + strlen(src)``.
    """
    head, tail = _c(dest), _c(src)
    if len(head) >= size:
        return head, size + len(tail)
    if len(head) + len(tail) < size:
        return strcat(head, tail), len(head) + len(tail)
    return strncat(head, tail, size - len(head) - 1), len(head) + len(tail)


def strdup(s: Optional[str]) -> Optional[str]:
    """A copy of ``s`` up to its terminator, or ``None`` for ``None``."""
    if s is None:
        return None
    return _c(s)