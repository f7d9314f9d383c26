"""Building new text from old: splitting, joining, trimming and mapping.

Text arguments may be ``str``, ``bytes`` or ``bytearray``. A NUL character
ends the text, as it would a C string. Results have the type of the input.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Union

from structsalad.cstring import strdup

Text = Union[str, bytes, bytearray]
Char = Union[int, str, bytes]


def _body(text: Text) -> Text:
    """Return ``text`` cut at its first NUL, as a fresh value."""
    return strdup(text)


def _separator(sep: Char, text: Text) -> Text:
    """Return ``sep`` as a one-character value of the same type as ``text``."""
    if isinstance(text, str):
        if isinstance(sep, int):
            return chr(sep & 0xFF)
        if isinstance(sep, (bytes, bytearray)):
            sep = sep.decode("latin-1")
        if len(sep) != 1:
            raise ValueError("separator must be a single character")
        return sep
    if isinstance(sep, int):
        return bytes([sep & 0xFF])
    if isinstance(sep, str):
        sep = sep.encode("latin-1")
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return bytes(sep)


def split(text: Text, sep: Char) -> List[Text]:
    """Return the non-empty runs of ``text`` between occurrences of ``sep``."""
    body = _body(text)
    return [word for word in body.split(_separator(sep, body)) if word]


def count_words(text: Text, sep: Char) -> int:
    """Return how many non-empty runs ``sep`` divides ``text`` into."""
    return len(split(text, sep))


def strjoin(s1: Optional[Text], s2: Optional[Text]) -> Optional[Text]:
    """Return ``s1`` followed by ``s2``, or None if either is missing."""
    if s1 is None or s2 is None:
        return None
    return _body(s1) + _body(s2)


def strtrim(text: Text, charset: Text) -> Text:
    """Return ``text`` without the leading and trailing characters in ``charset``."""
    body = _body(text)
    chars = _body(charset)
    if not chars:
        return body
    return body.strip(chars)


def substr(text: Text, start: int, length: int) -> Text:
    """Return at most ``length`` characters of ``text`` from index ``start``.

    A start past the end, or a length of zero or less, gives empty text.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    body = _body(text)
    if start >= len(body) or length <= 0:
        return body[:0]
    return body[start:start + length]


def strmapi(text: Text, f: Callable[[int, object], object]) -> Text:
    """Return new text made of ``f(index, char)`` for each character.

    For ``str`` the characters are one-character strings; for bytes they
    are integers and ``f`` must return integers.
    """
    body = _body(text)
    if isinstance(body, str):
        return "".join(f(index, ch) for index, ch in enumerate(body))
    mapped = bytes(f(index, ch) for index, ch in enumerate(body))
    return bytearray(mapped) if isinstance(body, bytearray) else mapped


def striteri(text: Text, f: Callable[[int, object], object]) -> Text:
    """Call ``f(index, char)`` on each character, applying any replacement.

    ``f`` returns a replacement character, or None to keep the one it got.
    A ``bytearray`` is changed in place up to its first NUL and returned;
    ``str`` and ``bytes`` give back new text.
    """
    if isinstance(text, bytearray):
        length = len(_body(text))
        for index in range(length):
            replacement = f(index, text[index])
            if replacement is not None:
                text[index] = replacement
        return text
    body = _body(text)
    if isinstance(body, str):
        pieces = []
        for index, ch in enumerate(body):
            replacement = f(index, ch)
            pieces.append(ch if replacement is None else replacement)
        return "".join(pieces)
    out = bytearray()
    for index, ch in enumerate(body):
        replacement = f(index, ch)
        out.append(ch if replacement is None else replacement)
    return bytes(out)