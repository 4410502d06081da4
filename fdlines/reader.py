"""Line-by-line reading from a single file descriptor."""

from __future__ import annotations

import os
from collections.abc import Iterator

from fdlines.stash import DEFAULT_BUFFER_SIZE, NEWLINE, split_line


class LineReader:
    """Read newline-terminated lines from a file descriptor in fixed-size chunks."""

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._stash = b""

    def _fill(self) -> None:
        while NEWLINE not in self._stash:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._stash = b""
                raise
            if not chunk:
                return
            self._stash += chunk

    def read_line(self) -> bytes | None:
        """Return the next line, newline included, or ``None`` at end of input."""
        self._fill()
        line, rest = split_line(self._stash)
        self._stash = rest or b""
        return line

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        line = self.read_line()
        if line is None:
            raise StopIteration
        return line