"""Helpers for splitting a pending byte buffer into a line and what follows it."""

from __future__ import annotations

DEFAULT_BUFFER_SIZE = 42
NEWLINE = b"\n"


def extract_line(stash: bytes | None) -> bytes | None:
    """Return the first line of ``stash``, newline included if there is one.

    An empty or missing stash holds no line, so ``None`` is returned.
    """
    if not stash:
        return None
    end = stash.find(NEWLINE)
    if end == -1:
        return bytes(stash)
    return bytes(stash[: end + 1])


def update_stash(stash: bytes | None) -> bytes | None:
    """Return what follows the first newline of ``stash``.

    ``None`` is returned when there is no newline or nothing follows it.
    """
    if not stash:
        return None
    end = stash.find(NEWLINE)
    if end == -1:
        return None
    rest = stash[end + 1 :]
    return bytes(rest) if rest else None


def split_line(stash: bytes | None) -> tuple[bytes | None, bytes | None]:
    """Split ``stash`` into its first line and the remaining stash."""
    return extract_line(stash), update_stash(stash)