"""Rendering of single conversions into padded text."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Iterator

from .spec import ConversionSpec, FormatError

DECIMAL = "0123456789"
LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"
NULL_TEXT = "(null)"
POINTER_PREFIX = "0x"

_UINT_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1


def _padding(work: ConversionSpec, length: int) -> str:
    """Return the fill that brings the field to its width, consuming that width."""
    fill = " " if work.flag == "-" else work.flag
    is_string = work.conversion == "s"
    if (is_string and work.precision > length) or work.conversion in ("c", "%"):
        work.precision = -1
    if is_string and work.precision > -1:
        target = work.precision
    else:
        target = max(work.precision, length)
    count = max(0, work.width - target)
    work.width -= count
    return fill * count


def _leading_zeros(work: ConversionSpec, length: int, fill_width: bool) -> str:
    zeros = 0
    if work.flag == "0" and fill_width and work.width > length:
        zeros = work.width - length
        work.width = length
    zeros += max(0, work.precision - length)
    return "0" * zeros


def _digits(value: int, alphabet: str) -> str:
    base = len(alphabet)
    if base < 2:
        raise ValueError("a digit alphabet needs at least two symbols")
    out = []
    while True:
        value, remainder = divmod(value, base)
        out.append(alphabet[remainder])
        if not value:
            break
    return "".join(reversed(out))


def _require_int(value: Any, conversion: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{conversion} expects an integer, got {type(value).__name__}")
    return value


def _as_int32(value: int) -> int:
    return ((value + (1 << 31)) & _UINT_MASK) - (1 << 31)


def _render_integer(work: ConversionSpec, is_zero: bool, sign: str, digits: str, length: int) -> str:
    parts = []
    if work.flag != "-" and (work.precision > -1 or work.flag != "0"):
        work.flag = " "
        parts.append(_padding(work, length))
    if is_zero and work.precision == 0:
        if work.width > 0:
            parts.append(" ")
    else:
        parts.append(sign)
        parts.append(_leading_zeros(work, length, work.precision < 0))
        parts.append(digits)
    parts.append(_padding(work, length))
    return "".join(parts)


def render_char(value: int | str, spec: ConversionSpec) -> str:
    """Render a character given as a code (taken modulo 256) or a one-character string."""
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        char = value
    else:
        char = chr(_require_int(value, "c") & 0xFF)
    work = replace(spec, conversion="%" if spec.conversion == "%" else "c")
    parts = []
    if work.flag != "-":
        parts.append(_padding(work, 1))
    parts.append(char)
    parts.append(_padding(work, 1))
    return "".join(parts)


def render_string(value: str | None, spec: ConversionSpec) -> str:
    """Render a string; ``None`` is shown as "(null)"."""
    if value is not None and not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    text = NULL_TEXT if value is None else value
    length = len(text)
    work = replace(spec, conversion="s")
    parts = []
    if work.flag != "-":
        parts.append(_padding(work, length))
    if 0 <= work.precision < length:
        parts.append(text[:work.precision])
    else:
        parts.append(text)
    parts.append(_padding(work, length))
    return "".join(parts)


def render_decimal(value: int, spec: ConversionSpec) -> str:
    """Render a signed 32-bit integer in decimal."""
    number = _as_int32(_require_int(value, "d"))
    work = replace(spec, conversion="d")
    digits = str(abs(number))
    length = len(digits) + (number < 0)
    if number < 0 and work.precision > 0:
        work.precision += 1
    return _render_integer(work, number == 0, "-" if number < 0 else "", digits, length)


def render_unsigned(value: int, spec: ConversionSpec, digits: str) -> str:
    """Render an unsigned 32-bit integer with the given digit alphabet."""
    number = _require_int(value, "u") & _UINT_MASK
    work = replace(spec, conversion="u")
    text = _digits(number, digits)
    return _render_integer(work, number == 0, "", text, len(text))


def render_pointer(value: int | None, spec: ConversionSpec) -> str:
    """Render an address as "0x" followed by lower-case hex; ``None`` is address 0."""
    address = 0 if value is None else _require_int(value, "p") & _POINTER_MASK
    work = replace(spec, conversion="p")
    text = _digits(address, LOWER_HEX)
    length = len(text) + len(POINTER_PREFIX)
    parts = []
    if work.flag == " ":
        parts.append(_padding(work, length))
    if not (address == 0 and work.precision == 0):
        parts.append(_leading_zeros(work, length, work.precision == -1))
        parts.append(POINTER_PREFIX)
        parts.append(text)
    parts.append(_padding(work, length))
    return "".join(parts)


_HANDLERS: dict[str, Callable[[Any, ConversionSpec], str]] = {
    "d": render_decimal,
    "i": render_decimal,
    "u": lambda value, spec: render_unsigned(value, spec, DECIMAL),
    "x": lambda value, spec: render_unsigned(value, spec, LOWER_HEX),
    "X": lambda value, spec: render_unsigned(value, spec, UPPER_HEX),
    "c": render_char,
    "s": render_string,
    "p": render_pointer,
}


def render(spec: ConversionSpec, args: Iterator[Any]) -> str:
    """Render ``spec``, taking its value (if it needs one) from the iterator ``args``."""
    conversion = spec.conversion
    if conversion == "%":
        return render_char("%", spec)
    handler = _HANDLERS.get(conversion)
    if handler is None:
        raise FormatError(f"unknown conversion {conversion!r}")
    try:
        value = next(args)
    except StopIteration:
        raise FormatError(f"missing argument for %{conversion}") from None
    return handler(value, spec)