"""Whole-file reading and writing helpers."""

from __future__ import annotations

import os
from typing import BinaryIO


def file_size(path: str | os.PathLike) -> int:
    """Return the size of the file at ``path`` in bytes."""
    with open(path, "rb") as stream:
        return stream.seek(0, os.SEEK_END)


def stream_size(stream: BinaryIO) -> int:
    """Return the size of an open seekable stream, keeping its position."""
    position = stream.tell()
    try:
        return stream.seek(0, os.SEEK_END)
    finally:
        stream.seek(position)


def read_file(path: str | os.PathLike, size: int | None = None, offset: int = 0) -> bytes:
    """Read ``size`` bytes starting at ``offset``; all remaining bytes if ``size`` is None.

    Raises EOFError if the file holds fewer than ``size`` bytes after ``offset``.
    """
    with open(path, "rb") as stream:
        stream.seek(offset)
        data = stream.read() if size is None else stream.read(size)
    if size is not None and len(data) != size:
        raise EOFError(f"expected {size} bytes from {os.fspath(path)!r}, got {len(data)}")
    return data


def write_file(path: str | os.PathLike, data: bytes, offset: int = 0) -> None:
    """Create or truncate ``path`` and write ``data`` at ``offset``."""
    with open(path, "wb") as stream:
        stream.seek(offset)
        stream.write(data)