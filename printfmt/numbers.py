"""Conversion between text and 32-bit signed integers."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_INT_BITS = 32


def _as_int32(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return ((value + half) & ((1 << _INT_BITS) - 1)) - half


def atoi(text: str) -> int:
    """Read a decimal integer from the start of ``text``.

    Leading whitespace is skipped and one optional sign is accepted; reading
    stops at the first non-digit. Text without digits gives 0. The result
    wraps around like a 32-bit signed integer.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    body = text.lstrip(_WHITESPACE)
    negative = body.startswith("-")
    if body[:1] in ("-", "+"):
        body = body[1:]
    count = 0
    for char in body:
        if char not in _DIGITS:
            break
        count += 1
    value = int(body[:count]) if count else 0
    return _as_int32(-value if negative else value)


def itoa(number: int) -> str:
    """Return the decimal text of ``number`` taken as a 32-bit signed integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    return str(_as_int32(number))