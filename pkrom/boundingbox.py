"""Placing a decompressed sprite inside its full-size tile frame."""

from __future__ import annotations

LDPKSPR_BYTES_PER_TILE = 8

_BYTE = 0xFF


def _box_offset(width: int, height: int, bb_width: int, bb_height: int, bytes_per_tile: int) -> int:
    """Byte offset of the bottom-centred box, computed in 8-bit arithmetic."""
    width &= _BYTE
    height &= _BYTE
    bb_width &= _BYTE
    bb_height &= _BYTE
    bytes_per_tile &= _BYTE
    y = (height - bb_height) & _BYTE
    x = int((width - bb_width + 1) / 2) & _BYTE
    offset = (height * x + y) & _BYTE
    return (bytes_per_tile * offset) & _BYTE


def _place(
    plane: bytes,
    width_in_tiles: int,
    height_in_tiles: int,
    bb_width: int,
    bb_height: int,
    bytes_per_tile: int,
) -> bytearray:
    size = len(plane)
    column_len = bb_height * bytes_per_tile
    if bb_width * column_len > size:
        raise ValueError(
            f"a {bb_width}x{bb_height} box needs {bb_width * column_len} bytes, plane has {size}"
        )
    placed = bytearray(size)
    dst = _box_offset(width_in_tiles, height_in_tiles, bb_width, bb_height, bytes_per_tile)
    src = 0
    for _ in range(bb_width):
        end = dst + column_len
        if end > size:
            raise ValueError("bounding box does not fit inside the frame")
        placed[dst:end] = plane[src : src + column_len]
        src += column_len
        dst += height_in_tiles * bytes_per_tile
    return placed


def add_bounding_box(
    plane0: bytes,
    plane1: bytes,
    bb_dimensions: int,
    width_in_tiles: int,
    height_in_tiles: int,
    bytes_per_tile: int = LDPKSPR_BYTES_PER_TILE,
) -> bytes:
    """Centre both planes at the bottom of the frame and interleave them.

    ``bb_dimensions`` holds the box width in tiles in its low nibble and
    the height in its high nibble. The result is twice as long as a plane,
    with bytes of ``plane0`` at even and bytes of ``plane1`` at odd offsets.
    """
    if len(plane0) != len(plane1):
        raise ValueError("both bitplanes must have the same size")
    bb_width = bb_dimensions & 0x0F
    bb_height = (bb_dimensions & 0xF0) >> 4
    placed0 = _place(plane0, width_in_tiles, height_in_tiles, bb_width, bb_height, bytes_per_tile)
    placed1 = _place(plane1, width_in_tiles, height_in_tiles, bb_width, bb_height, bytes_per_tile)
    zipped = bytearray(2 * len(plane0))
    zipped[0::2] = placed0
    zipped[1::2] = placed1
    return bytes(zipped)