"""Writing characters, strings, numbers and tables to a text stream."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from .numbers import itoa


def _stream(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def _write(text: str, file: TextIO | None) -> int:
    _stream(file).write(text)
    return len(text)


def put_char(char: int | str, file: TextIO | None = None) -> int:
    """Write one character; a code is taken modulo 256. Returns 1."""
    if isinstance(char, str):
        if len(char) != 1:
            raise TypeError("expected a single character")
        text = char
    elif isinstance(char, bool) or not isinstance(char, int):
        raise TypeError(f"expected a character, got {type(char).__name__}")
    else:
        text = chr(char & 0xFF)
    return _write(text, file)


def put_str(text: str | None, file: TextIO | None = None) -> int:
    """Write ``text``; None writes nothing. Returns the characters written."""
    if text is None:
        return 0
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    return _write(text, file)


def put_endl(text: str | None, file: TextIO | None = None) -> int:
    """Write ``text`` and a newline; None writes nothing. Returns the characters written."""
    if text is None:
        return 0
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    return _write(text + "\n", file)


def put_nbr(number: int, file: TextIO | None = None) -> int:
    """Write ``number`` in decimal, taken as a 32-bit signed integer."""
    return _write(itoa(number), file)


def put_table(table: Iterable[str | None], file: TextIO | None = None) -> int:
    """Write each entry on its own line, stopping at the first None."""
    written = 0
    for entry in table:
        if entry is None:
            break
        written += put_endl(entry, file)
    return written