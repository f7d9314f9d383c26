"""Formatted output with a small set of conversions.

Supported conversions: ``%%``, ``%c``, ``%s``, ``%p``, ``%d``, ``%i``,
``%u``, ``%x`` and ``%X``. Unknown conversions print nothing. Integer
conversions take their argument as a 32-bit C ``int`` or ``unsigned int``.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

from structsalad.output import (
    Stream,
    putchar_fd,
    putnbr_base_fd,
    putptr_fd,
    putstr_fd,
)

BASE_SMALL_HEX = "0123456789abcdef"
BASE_BIG_HEX = "0123456789ABCDEF"
BASE_DECIMAL = "0123456789"

_MASK32 = (1 << 32) - 1


def _signed32(value: int) -> int:
    value = int(value) & _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _unsigned32(value: int) -> int:
    return int(value) & _MASK32


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _put_text(value: Any, stream: Stream) -> int:
    if value is None:
        text = "(null)"
    elif isinstance(value, (bytes, bytearray)):
        text = bytes(value).decode("latin-1")
    else:
        text = str(value)
    text = text.split("\0", 1)[0]
    putstr_fd(text, stream)
    return len(text)


def _put_pointer(value: Any, stream: Stream) -> int:
    address = value if isinstance(value, int) else (0 if value is None else id(value))
    if not address:
        putstr_fd("(nil)", stream)
        return 5
    putstr_fd("0x", stream)
    return 2 + putptr_fd(address, stream)


def _convert(spec: str, args: Iterator[Any], stream: Stream) -> int:
    if spec == "%":
        putchar_fd("%", stream)
        return 1
    if spec == "c":
        putchar_fd(_next_arg(args), stream)
        return 1
    if spec == "s":
        return _put_text(_next_arg(args), stream)
    if spec == "p":
        return _put_pointer(_next_arg(args), stream)
    if spec in ("d", "i"):
        return putnbr_base_fd(_signed32(_next_arg(args)), BASE_DECIMAL, stream)
    if spec == "u":
        return putnbr_base_fd(_unsigned32(_next_arg(args)), BASE_DECIMAL, stream)
    if spec == "x":
        return putnbr_base_fd(_unsigned32(_next_arg(args)), BASE_SMALL_HEX, stream)
    if spec == "X":
        return putnbr_base_fd(_unsigned32(_next_arg(args)), BASE_BIG_HEX, stream)
    return 0


def printf(fmt: Optional[str], *args: Any, stream: Stream = None) -> int:
    """Write ``fmt`` with its conversions filled from ``args``.

    Returns the number of characters written, or -1 when ``fmt`` is None.
    Raises ``TypeError`` when the format asks for more arguments than given.
    """
    if fmt is None:
        return -1
    fmt = fmt.split("\0", 1)[0]
    values = iter(args)
    chars = iter(fmt)
    written = 0
    for ch in chars:
        if ch != "%":
            putchar_fd(ch, stream)
            written += 1
            continue
        spec = next(chars, None)
        if spec is None:
            break
        written += _convert(spec, values, stream)
    return written