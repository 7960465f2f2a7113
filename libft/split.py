"""Splitting NUL-terminated strings into words.

A word is a maximal run of characters other than the separator. As with
the other string routines, a ``'\\0'`` character ends the input.
"""

from __future__ import annotations

import re
from typing import Iterator, List, Optional, Sequence

from libft.cstrings import strlen


def _sep(sep: str) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return sep


def _words(s: str, sep: str) -> Iterator[re.Match]:
    text = s[: strlen(s)]
    pattern = "[^" + re.escape(_sep(sep)) + "]+"
    return re.finditer(pattern, text)


def numwords(s: str, sep: str) -> int:
    """Number of words in ``s`` separated by ``sep``."""
    return sum(1 for _ in _words(s, sep))


def countlet(s: str, sep: str) -> List[int]:
    """Length of each word in ``s``, in order."""
    return [len(m.group()) for m in _words(s, sep)]


def splitfill(s: str, lengths: Sequence[int], sep: str) -> List[str]:
    """Copy each word of ``s`` using the matching entry of ``lengths`` as
    the number of characters to take from the word's start."""
    matches = list(_words(s, sep))
    if len(lengths) < len(matches):
        raise ValueError(f"{len(matches)} words but only {len(lengths)} lengths given")
    text = s[: strlen(s)]
    words = []
    for match, length in zip(matches, lengths):
        if length < 0:
            raise ValueError(f"word length must not be negative, got {length}")
        words.append(text[match.start() : match.start() + length])
    return words


def splitmemdel(words: Optional[List[str]]) -> None:
    """Release every word of a split result; the list is left empty."""
    if words is not None:
        words.clear()
    return None


def strsplit(s: Optional[str], sep: str) -> Optional[List[str]]:
    """The words of ``s`` separated by ``sep``, or ``None`` for ``None``."""
    if s is None:
        return None
    return splitfill(s, countlet(s, sep), sep)


def copytomas(s: str, sep: str) -> List[str]:
    """Copy the words of ``s`` separated by ``sep`` into a new list."""
    return [m.group() for m in _words(s, sep)]