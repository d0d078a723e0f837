"""Writing bit-indexed (palette) BMP images."""

from __future__ import annotations

import os
import struct
from collections.abc import Sequence

BMP_BYTE_BOUNDARY = 4
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40

_FILE_HEADER = struct.Struct("<2sIHHI")
_INFO_HEADER = struct.Struct("<IIiHHIIIIII")


def max_colors(bpp: int) -> int:
    """Number of palette entries for ``bpp`` bits per pixel."""
    return 1 << bpp


def pixels_per_byte(bpp: int) -> int:
    """Pixels packed into one byte at ``bpp`` bits per pixel."""
    return 8 // bpp


def row_padding(bytes_per_row: int) -> int:
    """Zero bytes needed to end a row on a four-byte boundary."""
    return (BMP_BYTE_BOUNDARY - bytes_per_row % BMP_BYTE_BOUNDARY) % BMP_BYTE_BOUNDARY


def _bytes_per_row(width: int, bpp: int) -> int:
    per_byte = pixels_per_byte(bpp)
    return width // per_byte + (1 if width % per_byte else 0)


def _pixel_rows(data: bytes, bpp: int, width: int) -> bytes:
    if width % (BMP_BYTE_BOUNDARY * pixels_per_byte(bpp)) == 0:
        return bytes(data)
    row_len = _bytes_per_row(width, bpp)
    if len(data) % row_len:
        raise ValueError(f"pixel data of {len(data)} bytes is not a whole number of {row_len}-byte rows")
    padding = bytes(row_padding(row_len))
    return b"".join(
        bytes(data[start : start + row_len]) + padding for start in range(0, len(data), row_len)
    )


def bit_indexed_bmp(
    data: bytes, bpp: int, width: int, height: int, colors: Sequence[int]
) -> bytes:
    """Build a palette BMP from packed pixel rows.

    A negative ``height`` gives a top-down image. ``colors`` holds at least
    ``2**bpp`` entries of the form 0x00RRGGBB.
    """
    if not 1 <= bpp <= 8:
        raise ValueError(f"bits per pixel must be between 1 and 8, not {bpp}")
    palette_len = max_colors(bpp)
    if len(colors) < palette_len:
        raise ValueError(f"{palette_len} colours needed, {len(colors)} given")

    offset = FILE_HEADER_SIZE + INFO_HEADER_SIZE + 4 * palette_len
    row_len = _bytes_per_row(width, bpp)
    total = offset + (row_len + row_padding(row_len)) * abs(height)

    file_header = _FILE_HEADER.pack(b"BM", total & 0xFFFFFFFF, 0, 0, offset)
    info_header = _INFO_HEADER.pack(INFO_HEADER_SIZE, width, height, 1, bpp, 0, 0, 0, 0, 0, 0)
    palette = struct.pack(f"<{palette_len}I", *colors[:palette_len])
    return file_header + info_header + palette + _pixel_rows(data, bpp, width)


def write_bit_indexed_bmp(
    path: str | os.PathLike,
    data: bytes,
    bpp: int,
    width: int,
    height: int,
    colors: Sequence[int],
) -> None:
    """Write a palette BMP built by :func:`bit_indexed_bmp` to ``path``."""
    image = bit_indexed_bmp(data, bpp, width, height, colors)
    with open(path, "wb") as stream:
        stream.write(image)