"""ASCII character classification and case mapping, plus a byte-order probe.

Characters may be given as integer codes or as one-character ``str`` or
``bytes``. Case mapping returns a value of the type it was given.
"""

from __future__ import annotations

import struct
from typing import Union

Char = Union[int, str, bytes]


def _code(c: Char) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, bool):
        raise TypeError("expected a character, not a bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    if isinstance(c, (bytes, bytearray)):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c[0]
    raise TypeError(f"expected a character, got {type(c).__name__}")


def _like(code: int, c: Char) -> Char:
    """Return ``code`` in the same form as ``c``."""
    if isinstance(c, str):
        return chr(code)
    if isinstance(c, (bytes, bytearray)):
        return bytes([code])
    return code


def isalpha(c: Char) -> bool:
    """Tell whether ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: Char) -> bool:
    """Tell whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: Char) -> bool:
    """Tell whether ``c`` is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """Tell whether ``c`` lies in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """Tell whether ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def tolower(c: Char) -> Char:
    """Map an ASCII capital to its small letter; leave anything else."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _like(code + 32, c)
    return c


def toupper(c: Char) -> Char:
    """Map an ASCII small letter to its capital; leave anything else."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _like(code - 32, c)
    return c


def is_big_endian() -> bool:
    """Return the lowest-addressed byte of a native 32-bit 1 as a truth value.

    That byte is 1 on little-endian machines, so the result is True there
    and False on big-endian ones.
    """
    return bool(struct.pack("=I", 1)[0])