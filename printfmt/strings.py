"""String searching, comparison and bounded copying in the style of C strings.

Strings are Python ``str`` values; positions are returned as indices
(or None when nothing is found) and copies are returned as new strings.
"""

from __future__ import annotations

TERMINATOR = "\0"


def _text(value: str, name: str = "text") -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _char(value: int | str) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("expected a single character")
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected a character, got {type(value).__name__}")
    return chr(value & 0xFF)


def _count(value: int, name: str = "count") -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(_text(text))


def strchr(text: str, char: int | str) -> int | None:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for the terminator gives the length of ``text``.
    """
    text = _text(text)
    wanted = _char(char)
    if wanted == TERMINATOR:
        return len(text)
    found = text.find(wanted)
    return None if found < 0 else found


def strrchr(text: str, char: int | str) -> int | None:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for the terminator gives the length of ``text``.
    """
    text = _text(text)
    wanted = _char(char)
    if wanted == TERMINATOR:
        return len(text)
    found = text.rfind(wanted)
    return None if found < 0 else found


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    haystack = _text(haystack, "haystack")
    needle = _text(needle, "needle")
    length = _count(length, "length")
    if not needle:
        return 0
    found = haystack[:length].find(needle)
    return None if found < 0 else found


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns the difference of the codes of the first differing characters,
    the end of a string counting as code 0; 0 when they agree.
    """
    first = _text(first, "first")
    second = _text(second, "second")
    count = _count(count)
    for index in range(count):
        left = ord(first[index]) if index < len(first) else 0
        right = ord(second[index]) if index < len(second) else 0
        if left != right:
            return left - right
        if left == 0:
            break
    return 0


def strlcat(destination: str, source: str, size: int) -> tuple[str, int]:
    """Append ``source`` to ``destination`` within a buffer of ``size`` characters.

    The result holds at most ``size - 1`` characters. Returns the result and
    the length the full concatenation would have needed; when ``size`` is not
    larger than ``destination``, ``destination`` is left as is and the
    returned length is ``len(source) + size``.
    """
    destination = _text(destination, "destination")
    source = _text(source, "source")
    size = _count(size, "size")
    if size <= len(destination):
        return destination, len(source) + size
    room = size - 1 - len(destination)
    return destination + source[:room], len(destination) + len(source)


def strlcpy(source: str, size: int) -> tuple[str, int]:
    """Copy ``source`` into a buffer of ``size`` characters.

    Returns the copy, cut to at most ``size - 1`` characters, and the full
    length of ``source``.
    """
    source = _text(source, "source")
    size = _count(size, "size")
    if size == 0:
        return "", len(source)
    return source[:size - 1], len(source)


def strcat(destination: str, source: str | None) -> str:
    """Return ``destination`` followed by ``source``; a missing source leaves it as is."""
    destination = _text(destination, "destination")
    if source is None:
        return destination
    return destination + _text(source, "source")


def strcpy(source: str) -> str:
    """Return a copy of ``source``."""
    return _text(source, "source")[:]


def strncpy(source: str, count: int) -> str:
    """Return at most the first ``count`` characters of ``source``."""
    return _text(source, "source")[:_count(count)]


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return _text(text)[:]


def strndup(text: str, count: int) -> str:
    """Return a copy of at most the first ``count`` characters of ``text``."""
    return _text(text)[:_count(count)]