"""Integer parsing, formatting and swapping."""

from __future__ import annotations

from typing import Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")

_WHITESPACE = frozenset(" \t\n\v\f\r")
_U64_MASK = (1 << 64) - 1
_MIN_LONG = 9223372036854775808
_MAX_LONG = 9223372036854775807
_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C routine does.

    Leading whitespace is skipped, one optional sign is read, then digits
    up to the first non-digit. The value is accumulated as an unsigned
    64-bit number; a magnitude past the signed 64-bit range gives 0 for a
    negative number and -1 for a positive one. Otherwise the result is
    truncated to a signed 32-bit int.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped.startswith("-"):
        sign = -1
        stripped = stripped[1:]
    elif stripped.startswith("+"):
        stripped = stripped[1:]

    num = 0
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        num = (num * 10 + (ord(ch) - ord("0")) * sign) & _U64_MASK

    if sign == -1 and num < _MIN_LONG:
        return 0
    if sign == 1 and num > _MAX_LONG:
        return -1
    return _to_int32(num)


def itoa(n: int) -> str:
    """Format a signed 32-bit integer in decimal."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit int")
    return str(n)


def swap(a: T, b: U) -> Tuple[U, T]:
    """Return the two values in the opposite order."""
    return b, a