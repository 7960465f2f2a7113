# libft

A small library of classic character, number, memory, string, list and
line-reading helpers, written for Python.

## Installation

```
pip install .
```

To run the test suite, install the test extra and then run pytest:

```
pip install .[test]
pytest
```

## Conventions

- Strings are ordinary `str` values. A `'\0'` character ends a string the
  way the terminator does in C; everything after it is ignored.
- Routines that change a string or buffer in place in C return the new
  value instead (for example `strcat`, `strclr`, `striter`).
- Routines that return a pointer into a string or buffer in C return an
  index instead (`strchr`, `strstr`, `memchr`, ...), and `None` where C
  gives a null pointer.
- Character arguments may be an integer code or a one-character string.
- Memory routines work on `bytearray` or writable `memoryview` objects and
  raise `IndexError` when asked for more bytes than a buffer holds.

## Modules

- `libft.chars`: character classification and case conversion
  (`isalnum`, `isalpha`, `isascii`, `isdigit`, `isprint`, `tolower`, `toupper`).
- `libft.numbers`: `atoi` (C-style parsing, including its overflow
  behaviour), `itoa` (signed 32-bit integers only; larger values raise
  `OverflowError`) and `swap`, which returns the two values reversed.
- `libft.memory`: byte-buffer operations (`memset`, `bzero`, `memcpy`,
  `memccpy`, `memmove`, `memchr`, `memcmp`, `memalloc`, `memdel`).
- `libft.cstrings`: searching, comparing and copying strings
  (`strlen`, `strchr`, `strrchr`, `strcmp`, `strncmp`, `strstr`, `strnstr`,
  `strequ`, `strnequ`, `strcpy`, `strncpy`, `strcat`, `strncat`, `strlcat`,
  `strdup`). `strlcat` returns the new contents together with the length
  the full concatenation would have had.
- `libft.transform`: building new strings (`strnew`, `strclr`, `strdel`,
  `striter`, `striteri`, `strmap`, `strmapi`, `strsub`, `strjoin`, `strtrim`).
- `libft.split`: splitting on a separator character (`numwords`, `countlet`,
  `splitfill`, `splitmemdel`, `strsplit`, `copytomas`).
- `libft.output`: writing characters, strings and numbers unbuffered to
  standard output or a file descriptor (`putchar`, `putstr`, `putendl`,
  `putnbr` and their `_fd` forms).
- `libft.linked`: a singly linked list built from `ListNode`
  (`lstnew`, `lstadd`, `lstdelone`, `lstdel`, `lstiter`); a `ListNode` can
  be iterated to walk the list from that node on.
- `libft.lines`: reading a file descriptor one line at a time with
  `LineReader.read_line` or the shared-reader function `get_next_line`.
  Both return the line without its newline, or `None` at the end.
- `libft.keys`: the `Key` enumeration of keyboard key codes (letters, digits,
  plus/minus, arrows and escape).

## Example

```python
from libft.split import strsplit
from libft.numbers import atoi, itoa

words = strsplit("**hello*world**", "*")   # ["hello", "world"]
value = atoi("  -42abc")                   # -42
text = itoa(-2147483648)                   # "-2147483648"
```

Reading lines from a file:

```python
import os
from libft.lines import LineReader

reader = LineReader()
fd = os.open("map.fdf", os.O_RDONLY)
try:
    while (line := reader.read_line(fd)) is not None:
        print(line)
finally:
    os.close(fd)
```

## What this package does not do

The package is a library only. It has no command-line program and no
window or drawing code: it does not parse height maps, project them or
display a wireframe view. `libft.keys.Key` only names key codes; nothing in
the package listens for keyboard events.