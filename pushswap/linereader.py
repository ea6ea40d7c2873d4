"""Reading a file descriptor one line at a time through a fixed-size buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import BinaryIO, Union

BUFFER_SIZE = 42
ENCODING = "utf-8"

Source = Union[int, BinaryIO]


class LineReader:
    """Yield the lines of a descriptor or binary file, newline included.

    Data is read ``buffer_size`` bytes at a time until a newline turns up or
    the input ends. What was read past the newline is kept for the next call,
    separately for each reader. The last line is returned without a newline
    if the input does not end with one.
    """

    def __init__(self, fd: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if isinstance(fd, int) and fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        self._source = fd
        self._buffer_size = buffer_size
        self._pending = bytearray()

    def _read_chunk(self) -> bytes:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return self._source.read(self._buffer_size) or b""

    def read_line(self) -> str | None:
        """Return the next line, or None once the input is used up."""
        searched = 0
        while (newline := self._pending.find(b"\n", searched)) == -1:
            searched = len(self._pending)
            chunk = self._read_chunk()
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = len(self._pending) if newline == -1 else newline + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line.decode(ENCODING, errors="replace")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(fd: Source, buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield every line of ``fd`` in turn."""
    yield from LineReader(fd, buffer_size)