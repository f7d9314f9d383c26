"""Reading a file descriptor or binary stream one line at a time."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Union

GNL_BUFFER_SIZE = 10

Source = Union[int, Any]


@dataclass(frozen=True)
class LineResult:
    """One read: the line, if any, and whether the end of input was met."""

    line: Optional[bytes]
    ended: bool


class LineReader:
    """Read lines, newline included, from a descriptor or binary stream.

    ``fd`` is an integer file descriptor or an object with a ``read(n)``
    method. Input is pulled ``buffer_size`` bytes at a time; bytes past the
    returned line are kept for the next call. Read errors raise ``OSError``.
    """

    def __init__(self, fd: Source, buffer_size: int = GNL_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self.fd = fd
        self.buffer_size = buffer_size
        self._buffer = b""

    def _read(self) -> bytes:
        if isinstance(self.fd, int):
            return os.read(self.fd, self.buffer_size)
        data = self.fd.read(self.buffer_size)
        if data is None:
            return b""
        if isinstance(data, str):
            return data.encode("utf-8")
        return bytes(data)

    def next_line(self) -> LineResult:
        """Return the next line.

        At the end of input, a last line without newline comes back with
        ``ended`` set; after that the line is None.
        """
        line: Optional[bytes] = None
        while line is None or b"\n" not in line:
            if not self._buffer:
                self._buffer = self._read()
                if not self._buffer:
                    return LineResult(line, True)
            line = (line or b"") + self._buffer
            if b"\n" not in self._buffer:
                self._buffer = b""
        head, _, _ = line.partition(b"\n")
        _, _, self._buffer = self._buffer.partition(b"\n")
        return LineResult(head + b"\n", False)

    def __iter__(self) -> Iterator[bytes]:
        """Yield lines until the input is exhausted."""
        while True:
            result = self.next_line()
            if result.line is None:
                return
            yield result.line