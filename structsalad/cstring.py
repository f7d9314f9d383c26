"""NUL-terminated string helpers: searching, comparing and bounded copies.

Text arguments may be ``str``, ``bytes`` or ``bytearray``. A NUL character
ends the text, as it would a C string. Searches return the matching suffix
of the text, or None where nothing matches. Comparisons work on bytes, with
``str`` encoded as UTF-8. The copy functions write into a ``bytearray``
buffer in place and raise ``ValueError`` rather than overflow it.
"""

from __future__ import annotations

from typing import Optional, Union

Text = Union[str, bytes, bytearray]
Char = Union[int, str, bytes]


def _terminate(text: Text) -> Text:
    """Return ``text`` cut at its first NUL."""
    nul = "\0" if isinstance(text, str) else b"\0"
    end = text.find(nul)
    return text if end < 0 else text[:end]


def _as_bytes(text: Text) -> bytes:
    """Return the bytes of ``text`` up to its first NUL."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return bytes(_terminate(data))


def _char(c: Char, text: Text) -> Union[str, int]:
    """Return ``c`` in the form that searching ``text`` needs."""
    if isinstance(text, str):
        if isinstance(c, int):
            return chr(c & 0xFF)
        if isinstance(c, (bytes, bytearray)):
            c = c.decode("latin-1")
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, str):
        c = c.encode("latin-1")
    if len(c) != 1:
        raise ValueError("expected a single character")
    return c[0]


def _is_nul(ch: Union[str, int]) -> bool:
    return ch == "\0" or ch == 0


def _require_buffer(dest: bytearray) -> None:
    if not isinstance(dest, bytearray):
        raise TypeError("destination must be a bytearray")


def _buffer_len(dest: bytearray) -> int:
    """Return the length of the string held in ``dest``."""
    end = dest.find(0)
    if end < 0:
        raise ValueError("destination buffer holds no terminating NUL")
    return end


def _write(dest: bytearray, start: int, data: bytes) -> None:
    """Write ``data`` and a NUL into ``dest`` at ``start``."""
    stop = start + len(data) + 1
    if stop > len(dest):
        raise ValueError(
            f"buffer of {len(dest)} bytes cannot hold {stop} bytes"
        )
    dest[start:stop] = data + b"\0"


def strlen(text: Text) -> int:
    """Return the length of ``text`` up to its first NUL."""
    return len(_terminate(text))


def strchr(text: Optional[Text], c: Char) -> Optional[Text]:
    """Return ``text`` from the first occurrence of ``c``, or None.

    Searching for NUL yields the empty end of the text.
    """
    if text is None:
        return None
    body = _terminate(text)
    ch = _char(c, body)
    if _is_nul(ch):
        return body[len(body):]
    index = body.find(ch)
    return None if index < 0 else body[index:]


def strchri(text: Optional[Text], c: Char) -> int:
    """Return the index of the first ``c`` in ``text``, or -1.

    Searching for NUL yields the length of the text.
    """
    if text is None:
        return -1
    body = _terminate(text)
    ch = _char(c, body)
    if _is_nul(ch):
        return len(body)
    return body.find(ch)


def strrchr(text: Text, c: Char) -> Optional[Text]:
    """Return ``text`` from the last occurrence of ``c``, or None.

    Searching for NUL yields the empty end of the text.
    """
    body = _terminate(text)
    ch = _char(c, body)
    if _is_nul(ch):
        return body[len(body):]
    index = body.rfind(ch)
    return None if index < 0 else body[index:]


def strcmp(s1: Text, s2: Text) -> int:
    """Compare two texts bytewise; return the difference at the first mismatch."""
    for a, b in zip(_as_bytes(s1) + b"\0", _as_bytes(s2) + b"\0"):
        if a != b or a == 0:
            return a - b
    return 0


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` bytes of two texts."""
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = zip(_as_bytes(s1) + b"\0", _as_bytes(s2) + b"\0")
    for index, (a, b) in enumerate(pairs):
        if index >= n:
            return 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: Text, needle: Text, length: int) -> Optional[Text]:
    """Return ``haystack`` from the first ``needle`` lying within ``length``.

    An empty needle matches at the start. A match must end within the first
    ``length`` characters.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    body = _terminate(haystack)
    target = _terminate(needle)
    if not target:
        return body
    last_start = min(len(body), length) - len(target)
    index = body.find(target, 0, max(last_start, -1) + len(target))
    if index < 0 or index > last_start:
        return None
    return body[index:]


def strend(text: Optional[Text], suffix: Optional[Text]) -> bool:
    """Tell whether ``text`` ends with ``suffix``."""
    if text is None or suffix is None:
        return False
    return _terminate(text).endswith(_terminate(suffix))


def strcpy(dest: bytearray, src: Text) -> bytearray:
    """Copy ``src`` and a NUL to the start of ``dest``; return ``dest``."""
    _require_buffer(dest)
    _write(dest, 0, _as_bytes(src))
    return dest


def strcat(dest: bytearray, src: Text) -> bytearray:
    """Append ``src`` to the string held in ``dest``; return ``dest``."""
    _require_buffer(dest)
    _write(dest, _buffer_len(dest), _as_bytes(src))
    return dest


def strlcpy(dest: bytearray, src: Text, size: int) -> int:
    """Copy at most ``size - 1`` bytes of ``src`` into ``dest``, NUL-ended.

    Returns the full length of ``src``; a result of ``size`` or more means
    the copy was cut short.
    """
    _require_buffer(dest)
    if size < 0:
        raise ValueError("size must not be negative")
    data = _as_bytes(src)
    if size == 0:
        return len(data)
    _write(dest, 0, data[: size - 1])
    return len(data)


def strlcat(dest: bytearray, src: Text, size: int) -> int:
    """Append ``src`` to ``dest`` so that the result fits in ``size`` bytes.

    Returns the length of the string it tried to build; when ``size`` does
    not exceed the current length of ``dest``, nothing is written and
    ``len(src) + size`` is returned.
    """
    _require_buffer(dest)
    if size < 0:
        raise ValueError("size must not be negative")
    data = _as_bytes(src)
    dest_len = _buffer_len(dest)
    if size <= dest_len:
        return len(data) + size
    _write(dest, dest_len, data[: size - 1 - dest_len])
    return dest_len + len(data)


def strdup(text: Text) -> Text:
    """Return a copy of ``text`` up to its first NUL."""
    body = _terminate(text)
    if isinstance(body, bytearray):
        return bytearray(body)
    return body