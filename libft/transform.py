"""Building new strings from NUL-terminated ones.

Strings are plain ``str`` values; a ``'\\0'`` character ends a string the
way the terminator does in C. Routines that change a string in place in C
return the changed value here, and a null pointer becomes ``None``.
"""

from __future__ import annotations

from typing import Callable, Optional

from libft.cstrings import strlen

_NUL = "\0"
_TRIMMED = " \t\n"


def _text(s: str) -> str:
    return s[: strlen(s)]


def strnew(size: int) -> str:
    """A new string of ``size`` terminator characters, i.e. an empty string
    with room for ``size`` characters."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return _NUL * size


def strclr(s: Optional[str]) -> Optional[str]:
    """``s`` with every character before its terminator set to ``'\\0'``."""
    if s is None:
        return None
    length = strlen(s)
    return _NUL * length + s[length:]


def strdel(s: Optional[str]) -> None:
    """Release a string; callers rebind their name to the result.

    Raises TypeError when given something that is not a string.
    """
    if s is not None and not isinstance(s, str):
        raise TypeError(f"expected a string or None, got {type(s).__name__}")
    return None


def striter(s: Optional[str], func: Optional[Callable[[str], Optional[str]]]) -> Optional[str]:
    """Call ``func`` on each character of ``s``.

    When ``func`` returns a string it replaces the character; when it
    returns ``None`` the character is kept. Returns the resulting string,
    or ``s`` unchanged when either argument is missing.
    """
    if s is None or func is None:
        return s
    text = _text(s)
    out = []
    for ch in text:
        replaced = func(ch)
        out.append(ch if replaced is None else replaced)
    return "".join(out) + s[len(text):]


def striteri(
    s: Optional[str], func: Optional[Callable[[int, str], Optional[str]]]
) -> Optional[str]:
    """Like :func:`striter`, but ``func`` also receives the character's index."""
    if s is None or func is None:
        return s
    text = _text(s)
    out = []
    for index, ch in enumerate(text):
        replaced = func(index, ch)
        out.append(ch if replaced is None else replaced)
    return "".join(out) + s[len(text):]


def strmap(s: Optional[str], func: Optional[Callable[[str], str]]) -> Optional[str]:
    """A new string made of ``func`` applied to each character of ``s``."""
    if s is None or func is None:
        return None
    return "".join(func(ch) for ch in _text(s))


def strmapi(s: Optional[str], func: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Like :func:`strmap`, but ``func`` also receives the character's index."""
    if s is None or func is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(_text(s)))


def strsub(s: Optional[str], start: int, length: int) -> Optional[str]:
    """The ``length`` characters of ``s`` beginning at ``start``.

    Returns ``None`` when ``s`` is missing or the string ends before
    ``length`` characters were taken.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _text(s)
    if start > len(text):
        raise IndexError(f"start {start} lies past the end of a string of length {len(text)}")
    if start + length > len(text):
        return None
    return text[start : start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """A new string holding ``s1`` followed by ``s2``, or ``None`` if either
    is missing."""
    if s1 is None or s2 is None:
        return None
    return _text(s1) + _text(s2)


def strtrim(s: Optional[str]) -> Optional[str]:
    """``s`` without leading and trailing spaces, tabs and newlines."""
    if s is None:
        return None
    return _text(s).strip(_TRIMMED)