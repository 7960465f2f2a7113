"""Character, number, memory, string, list, output and line-reading helpers, plus key codes."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "numbers",
    "memory",
    "cstrings",
    "transform",
    "split",
    "output",
    "linked",
    "lines",
    "keys",
]