"""Interleaving two 1-bit planes into 2-bit-per-pixel data."""

from __future__ import annotations


def _interleave(a: int, b: int, bits: range) -> int:
    value = 0
    for j in bits:
        value <<= 2
        value |= ((b >> (7 - j)) & 0x1) << 1
        value |= (a >> (7 - j)) & 0x1
    return value


def mix_pair(a: int, b: int) -> tuple[int, int]:
    """Merge plane bytes ``a`` (low bit) and ``b`` (high bit) into two bytes.

    The first result holds the four leftmost pixels, the second the rest.
    """
    return _interleave(a, b, range(0, 4)), _interleave(a, b, range(4, 8))


def merge_bitplanes(buffer: bytes) -> bytes:
    """Merge every consecutive pair of plane bytes; a trailing odd byte is kept."""
    merged = bytearray(buffer)
    for i in range(0, len(merged) - 1, 2):
        merged[i], merged[i + 1] = mix_pair(merged[i], merged[i + 1])
    return bytes(merged)