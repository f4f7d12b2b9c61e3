"""Classification and case conversion of single ASCII characters."""

from __future__ import annotations

from typing import overload

_LOWER = range(ord("a"), ord("z") + 1)
_UPPER = range(ord("A"), ord("Z") + 1)
_DIGIT = range(ord("0"), ord("9") + 1)
_CASE_SHIFT = ord("a") - ord("A")


def _code(value: int | str) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("expected a single character")
        return ord(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected a character code, got {type(value).__name__}")
    return value


def isalpha(code: int | str) -> bool:
    """Return True for an ASCII letter."""
    value = _code(code)
    return value in _LOWER or value in _UPPER


def isdigit(code: int | str) -> bool:
    """Return True for an ASCII decimal digit."""
    return _code(code) in _DIGIT


def isalnum(code: int | str) -> bool:
    """Return True for an ASCII letter or digit."""
    return isalpha(code) or isdigit(code)


def isascii(code: int | str) -> bool:
    """Return True for a code in the range 0..127."""
    return 0 <= _code(code) <= 127


def isprint(code: int | str) -> bool:
    """Return True for a printable ASCII character (space through '~')."""
    return 32 <= _code(code) <= 126


@overload
def tolower(code: int) -> int: ...
@overload
def tolower(code: str) -> str: ...


def tolower(code):
    """Map an upper-case ASCII letter to lower case; leave anything else alone.

    A code gives back a code, a one-character string gives back a string.
    """
    value = _code(code)
    if value in _UPPER:
        value += _CASE_SHIFT
    return chr(value) if isinstance(code, str) else value


@overload
def toupper(code: int) -> int: ...
@overload
def toupper(code: str) -> str: ...


def toupper(code):
    """Map a lower-case ASCII letter to upper case; leave anything else alone.

    A code gives back a code, a one-character string gives back a string.
    """
    value = _code(code)
    if value in _LOWER:
        value -= _CASE_SHIFT
    return chr(value) if isinstance(code, str) else value