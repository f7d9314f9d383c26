"""Byte-buffer operations: fill, allocate, search, compare and copy.

Destinations are writable buffers such as ``bytearray``. Counts that reach
past the end of a buffer raise ``ValueError`` instead of overrunning it.
"""

from __future__ import annotations

import sys
from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
Data = Union[bytes, bytearray, memoryview]

_SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *buffers: Data) -> None:
    if n < 0:
        raise ValueError("count must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(
                f"count {n} exceeds buffer of {len(buffer)} bytes"
            )


def memset(buffer: Buffer, value: int, count: int) -> Buffer:
    """Set the first ``count`` bytes of ``buffer`` to ``value``; return it."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: Buffer, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count`` elements of ``size`` bytes.

    Raises ``OverflowError`` when the total would not fit in a size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > _SIZE_MAX // size:
        raise OverflowError(f"{count} elements of {size} bytes is too large")
    return bytearray(count * size)


def memchr(data: Data, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte ``c`` in the first ``n`` bytes, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: Data, s2: Data, n: int) -> int:
    """Compare ``n`` bytes; return the difference at the first mismatch, or 0."""
    _check_count(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: Buffer, src: Data, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``; return ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy ``n`` bytes within ``buffer`` from offset ``src`` to ``dest``.

    The regions may overlap. Returns ``buffer``.
    """
    if dest < 0 or src < 0 or n < 0:
        raise ValueError("offsets and count must not be negative")
    if max(dest, src) + n > len(buffer):
        raise ValueError("region reaches past the end of the buffer")
    if dest != src:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer