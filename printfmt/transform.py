"""Building new strings by splitting, trimming, slicing, joining and mapping."""

from __future__ import annotations

from typing import Callable


def _text(value: str, name: str = "text") -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _single(value: str, name: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise TypeError(f"{name} must be a single character")
    return value


def _index(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    text = _text(text)
    separator = _single(separator, "separator")
    return [piece for piece in text.split(separator) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    text = _text(text)
    charset = _text(charset, "charset")
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end gives an empty string.
    """
    text = _text(text)
    start = _index(start, "start")
    length = _index(length, "length")
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return _text(first, "first") + _text(second, "second")


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to every character."""
    text = _text(text)
    if not callable(func):
        raise TypeError("func must be callable")
    mapped = []
    for index, char in enumerate(text):
        result = func(index, char)
        if not isinstance(result, str) or len(result) != 1:
            raise TypeError("func must return a single character")
        mapped.append(result)
    return "".join(mapped)