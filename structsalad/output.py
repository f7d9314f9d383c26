"""Writing characters, text and numbers to a stream or file descriptor.

``stream`` is an integer file descriptor or an object with a ``write``
method taking ``str``; it defaults to standard output.
"""

from __future__ import annotations

import os
import sys
from typing import Any, Optional, Union

Stream = Optional[Union[int, Any]]

_MASK64 = (1 << 64) - 1
_SMALL_HEX = "0123456789abcdef"
_DECIMAL = "0123456789"


def _emit(stream: Stream, text: str) -> None:
    if stream is None:
        stream = sys.stdout
    if isinstance(stream, int):
        view = memoryview(text.encode("utf-8"))
        while view:
            written = os.write(stream, view)
            view = view[written:]
    else:
        stream.write(text)


def _in_base(value: int, base: str) -> str:
    """Return the non-negative ``value`` written with the digits of ``base``."""
    radix = len(base)
    digits = []
    while True:
        value, rem = divmod(value, radix)
        digits.append(base[rem])
        if value == 0:
            break
    return "".join(reversed(digits))


def putchar_fd(c: Union[str, int], stream: Stream = None) -> None:
    """Write one character, given as a one-character string or a byte code."""
    if isinstance(c, int):
        c = chr(c & 0xFF)
    if len(c) != 1:
        raise ValueError("expected a single character")
    _emit(stream, c)


def putstr_fd(text: str, stream: Stream = None) -> None:
    """Write ``text`` up to its first NUL."""
    _emit(stream, text.split("\0", 1)[0])


def putendl_fd(text: str, stream: Stream = None) -> None:
    """Write ``text`` followed by a newline."""
    putstr_fd(text, stream)
    putchar_fd("\n", stream)


def putnbr_fd(n: int, stream: Stream = None) -> None:
    """Write ``n`` in decimal."""
    putnbr_base_fd(n, _DECIMAL, stream)


def putnbr_base_fd(nb: int, base: str, stream: Stream = None) -> int:
    """Write ``nb`` with the digits of ``base``; return the characters written.

    A negative number is preceded by a minus sign. ``base`` needs at least
    two digits.
    """
    if len(base) < 2:
        raise ValueError("base must have at least two digits")
    nb = int(nb)
    text = ("-" if nb < 0 else "") + _in_base(abs(nb), base)
    _emit(stream, text)
    return len(text)


def putptr_fd(ptr: int, stream: Stream = None) -> int:
    """Write an address in lower-case hex, without prefix; return its length.

    The value is taken as an unsigned 64-bit size.
    """
    text = _in_base(int(ptr) & _MASK64, _SMALL_HEX)
    _emit(stream, text)
    return len(text)