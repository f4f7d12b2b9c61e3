"""Formatting of whole templates with printf-style conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Iterator, TextIO

from .render import render
from .spec import parse_spec


def _pieces(template: str, args: Iterable[Any]) -> Iterator[str]:
    pending = iter(args)
    pos = 0
    end = len(template)
    while pos < end:
        percent = template.find("%", pos)
        if percent < 0 or percent == end - 1:
            yield template[pos:]
            return
        if percent > pos:
            yield template[pos:percent]
        spec, pos = parse_spec(template, percent, pending)
        yield render(spec, pending)


def format_string(template: str, *args: Any) -> str:
    """Return ``template`` with its conversions filled from ``args``.

    Supports %c %s %p %d %i %u %x %X and %%, the flags '-' and '0', and
    widths and precisions given as digits or '*'. A lone '%' at the very end
    is kept as text. Extra arguments are ignored.
    """
    return "".join(_pieces(template, args))


def print_formatted(template: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted template to ``file`` (standard output by default).

    Returns the number of characters written. Text before a faulty
    conversion is written before the error is raised.
    """
    stream = sys.stdout if file is None else file
    written = 0
    for piece in _pieces(template, args):
        stream.write(piece)
        written += len(piece)
    return written