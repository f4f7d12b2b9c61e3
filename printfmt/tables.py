"""Helpers for tables of strings that may end with a None terminator."""

from __future__ import annotations

from itertools import takewhile
from typing import Iterable, Sequence


def _entries(table: Iterable[str | None]) -> list[str]:
    return list(takewhile(lambda entry: entry is not None, table))


def table_size(table: Iterable[str | None]) -> int:
    """Return the number of entries before the first None."""
    return len(_entries(table))


def table_dup(table: Iterable[str | None]) -> list[str]:
    """Return a new list holding the entries before the first None."""
    return _entries(table)


def resize_table(
    table: Sequence[str | None] | None, new_size: int
) -> Sequence[str | None]:
    """Return a table with room for ``new_size`` entries.

    A missing table gives ``new_size`` empty slots. A table that already
    holds at least ``new_size`` entries is returned unchanged; otherwise its
    entries are copied and the free slots are filled with None.
    """
    if isinstance(new_size, bool) or not isinstance(new_size, int):
        raise TypeError(f"new_size must be an integer, got {type(new_size).__name__}")
    if new_size < 0:
        raise ValueError("new_size must not be negative")
    if table is None:
        return [None] * new_size
    entries = _entries(table)
    if len(entries) >= new_size:
        return table
    return entries + [None] * (new_size - len(entries))