"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_count(count: int, *buffers: ReadableBuffer) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(f"count {count} exceeds buffer length {len(buffer)}")


def bzero(buffer: Buffer, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    _check_count(count, buffer)
    buffer[:count] = bytes(count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memset(buffer: Buffer, value: int, count: int) -> Buffer:
    """Fill the first ``count`` bytes with ``value`` (taken modulo 256); return the buffer."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def memcpy(destination: Buffer, source: ReadableBuffer, count: int) -> Buffer:
    """Copy ``count`` bytes from ``source`` to the start of ``destination``."""
    _check_count(count, destination, source)
    destination[:count] = bytes(source[:count])
    return destination


def memccpy(destination: Buffer, source: ReadableBuffer, stop: int, count: int) -> int | None:
    """Copy bytes up to and including the first ``stop`` byte, at most ``count``.

    Returns the offset in ``destination`` just past the copied ``stop`` byte,
    or None when it did not occur among the first ``count`` bytes.
    """
    _check_count(count, destination, source)
    found = bytes(source[:count]).find(stop & 0xFF)
    copied = count if found < 0 else found + 1
    destination[:copied] = bytes(source[:copied])
    return None if found < 0 else copied


def memchr(buffer: ReadableBuffer, value: int, count: int) -> int | None:
    """Return the offset of the first ``value`` byte among the first ``count``, or None."""
    _check_count(count, buffer)
    found = bytes(buffer[:count]).find(value & 0xFF)
    return None if found < 0 else found


def memcmp(first: ReadableBuffer, second: ReadableBuffer, count: int) -> int:
    """Compare the first ``count`` bytes.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_count(count, first, second)
    for left, right in zip(bytes(first[:count]), bytes(second[:count])):
        if left != right:
            return left - right
    return 0


def memmove(destination: Buffer, source: ReadableBuffer, count: int) -> Buffer:
    """Copy ``count`` bytes even when the two buffers overlap; return ``destination``."""
    _check_count(count, destination, source)
    snapshot = bytes(source[:count])
    destination[:count] = snapshot
    return destination