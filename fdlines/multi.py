"""Line-by-line reading from several file descriptors at once."""

from __future__ import annotations

import os

from fdlines.stash import DEFAULT_BUFFER_SIZE, NEWLINE, split_line


class MultiLineReader:
    """Read lines from any number of file descriptors, keeping a stash for each."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._stashes: dict[int, bytes] = {}

    def _fill(self, fd: int) -> bytes:
        stash = self._stashes.setdefault(fd, b"")
        while NEWLINE not in stash:
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                self.discard(fd)
                raise
            if not chunk:
                break
            stash += chunk
            self._stashes[fd] = stash
        return stash

    def read_line(self, fd: int) -> bytes | None:
        """Return the next line from ``fd``, or ``None`` once it is exhausted."""
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        line, rest = split_line(self._fill(fd))
        if rest is None:
            self.discard(fd)
        else:
            self._stashes[fd] = rest
        return line

    def discard(self, fd: int) -> None:
        """Forget any pending data held for ``fd``."""
        self._stashes.pop(fd, None)

    def __contains__(self, fd: object) -> bool:
        return fd in self._stashes

    def __len__(self) -> int:
        return len(self._stashes)