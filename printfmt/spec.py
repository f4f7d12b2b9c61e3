"""Parsing of conversion specifications inside a format template."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterator

CONVERSIONS = frozenset("cspdiuxX%")

_DIGITS = re.compile(r"[0-9]*")


class FormatError(ValueError):
    """Raised when a template or its arguments cannot be formatted."""


@dataclass
class ConversionSpec:
    """One parsed conversion.

    ``flag`` is ``" "`` (right-justify with spaces), ``"0"`` (zero-fill) or
    ``"-"`` (left-justify). ``width`` and ``precision`` are -1 when absent.
    """

    conversion: str
    flag: str = " "
    width: int = -1
    precision: int = -1


def _star_argument(args: Iterator[Any]) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise FormatError("not enough arguments for '*'") from None
    if not isinstance(value, int):
        raise TypeError(f"'*' expects an integer, got {type(value).__name__}")
    return value


def _read_number(template: str, pos: int) -> tuple[str, int]:
    match = _DIGITS.match(template, pos)
    return match.group(), match.end()


def parse_spec(template: str, pos: int, args: Iterator[Any]) -> tuple[ConversionSpec, int]:
    """Parse the conversion whose '%' is at ``template[pos]``.

    ``args`` is an iterator from which '*' widths and precisions are taken.
    Returns the spec and the index just past the conversion letter.
    """
    if template[pos:pos + 1] != "%":
        raise FormatError(f"no conversion at position {pos}")
    i = pos + 1
    if i >= len(template):
        raise FormatError("incomplete conversion at end of template")

    flag = "0" if template[i] == "0" else " "
    while i < len(template) and template[i] in "-0":
        if template[i] == "-":
            flag = "-"
        i += 1

    if template.startswith("*", i):
        i += 1
        width = _star_argument(args)
        if width < 0:
            flag = "-"
            width = -width
    else:
        digits, i = _read_number(template, i)
        width = int(digits) if digits else -1

    precision = -1
    if template.startswith(".", i):
        i += 1
        if template.startswith("*", i):
            i += 1
            precision = max(_star_argument(args), -1)
        else:
            digits, i = _read_number(template, i)
            precision = int(digits) if digits else 0

    conversion = template[i:i + 1]
    if not conversion:
        raise FormatError("incomplete conversion at end of template")
    if conversion not in CONVERSIONS:
        raise FormatError(f"unknown conversion {conversion!r} at position {i}")
    return ConversionSpec(conversion, flag, width, precision), i + 1