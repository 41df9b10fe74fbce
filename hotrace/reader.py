"""Buffered line reading from a binary stream."""

from __future__ import annotations

from typing import BinaryIO, Iterator, Optional

__all__ = ["LineReader", "READ_SIZE"]

READ_SIZE = 8192


class LineReader:
    """Read newline-terminated lines from a binary stream in fixed-size chunks.

    Each line keeps its trailing newline; the final line of the stream may lack
    one. Once the stream is exhausted, ``readline`` returns None.
    """

    def __init__(self, stream: BinaryIO, chunk_size: int = READ_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be a positive integer")
        self._stream = stream
        self._chunk_size = chunk_size
        self._buf = b""
        self._pos = 0

    def _refill(self) -> bool:
        chunk = self._stream.read(self._chunk_size)
        if not chunk:
            return False
        self._buf = bytes(chunk)
        self._pos = 0
        return True

    def readline(self) -> Optional[bytes]:
        """Return the next line, newline included, or None at end of input."""
        line = bytearray()
        while True:
            if self._pos >= len(self._buf) and not self._refill():
                break
            end = self._buf.find(b"\n", self._pos)
            if end == -1:
                line += self._buf[self._pos:]
                self._pos = len(self._buf)
            else:
                line += self._buf[self._pos:end + 1]
                self._pos = end + 1
                break
        return bytes(line) if line else None

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.readline()) is not None:
            yield line