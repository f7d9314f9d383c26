"""Conversions between integers and their decimal text."""

from __future__ import annotations

from typing import MutableSequence, Optional, Union

Text = Union[str, bytes, bytearray]

_WHITESPACE = "\n \f\r\t\v"
_DIGITS = "0123456789"
_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1


def _to_int32(value: int) -> int:
    """Wrap ``value`` into the range of a signed 32-bit integer."""
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def atoi(text: Optional[Text]) -> int:
    """Parse a decimal integer the way the C library ``atoi`` does.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit. Parsing stops at a NUL. Missing text or text with
    no digits gives 0. Values outside 32 bits wrap around.
    """
    if text is None:
        return 0
    body = text if isinstance(text, str) else bytes(text).decode("latin-1")
    nul = body.find("\0")
    if nul >= 0:
        body = body[:nul]
    body = body.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    result = 0
    for ch in body:
        if ch not in _DIGITS:
            break
        result = (result * 10 + _DIGITS.index(ch)) & _MASK64
    return _to_int32(result * sign)


def int_len(n: int) -> int:
    """Return the number of decimal digits in ``n``, not counting a sign."""
    return len(str(abs(int(n))))


def itoa(n: int) -> str:
    """Return the decimal text of ``n``, with a leading minus if negative."""
    return str(int(n))


def itoab(n: int, buffer: MutableSequence, offset: int) -> int:
    """Write the decimal text of ``n`` and a NUL into ``buffer`` at ``offset``.

    ``buffer`` is a list of characters or a ``bytearray``. Returns the index
    of the terminating NUL. Raises ``ValueError`` if the text does not fit.
    """
    if offset < 0:
        raise ValueError("offset must not be negative")
    text = itoa(n) + "\0"
    end = offset + len(text)
    if end > len(buffer):
        raise ValueError(
            f"buffer of {len(buffer)} items cannot hold {end} items"
        )
    if isinstance(buffer, (bytearray, memoryview)):
        buffer[offset:end] = text.encode("ascii")
    else:
        buffer[offset:end] = list(text)
    return end - 1