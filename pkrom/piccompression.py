"""Decompression of the game's packed two-bitplane pictures."""

from __future__ import annotations

from pkrom.bititer import BitIterator
from pkrom.bitops import bit, swap

_BYTE = 0xFF
_WORD = 0xFFFF
_BIT_GROUPS = (0b11, 0b10, 0b01, 0b00)


def delta_decode_byte(byte: int, last_bit: int, mirror: bool = False) -> tuple[int, int]:
    """Delta-decode one byte; return ``(decoded, last_bit)``."""
    if last_bit not in (0, 1):
        raise ValueError(f"last_bit must be 0 or 1, not {last_bit}")
    decoded = 0
    for i in range(7, -1, -1):
        if (byte >> i) & 0x01:
            last_bit = 1 - last_bit
        if mirror:
            decoded = (decoded >> 1) | (last_bit << 7)
        else:
            decoded = ((decoded << 1) | last_bit) & _BYTE
    return (swap(decoded) if mirror else decoded), last_bit


def mirror_nibble(nibble: int) -> int:
    """Reverse the order of the low four bits."""
    return sum(bit(nibble, i) << (3 - i) for i in range(4))


def mirror_both_nibbles(byte: int) -> int:
    """Reverse the bit order inside each nibble of a byte."""
    return (mirror_nibble(byte >> 4) << 4) | mirror_nibble(byte & 0x0F)


def _delta_decode(plane: bytearray, width: int, height: int, mirror: bool) -> None:
    for row in range(height):
        last_bit = 0
        for index in range(row, row + width * height, height):
            plane[index], last_bit = delta_decode_byte(plane[index], last_bit, mirror)


def _xor_into(plane: bytearray, other: bytearray, width: int, height: int, mirror: bool) -> None:
    for index in range(width * height):
        if mirror:
            plane[index] = mirror_both_nibbles(plane[index])
        plane[index] ^= other[index]


def _mode_0(first: bytearray, second: bytearray, width: int, height: int, mirror: bool) -> None:
    _delta_decode(second, width, height, mirror)
    _delta_decode(first, width, height, mirror)


def _mode_1(first: bytearray, second: bytearray, width: int, height: int, mirror: bool) -> None:
    _delta_decode(first, width, height, mirror)
    _xor_into(second, first, width, height, mirror)


def _mode_2(first: bytearray, second: bytearray, width: int, height: int, mirror: bool) -> None:
    _delta_decode(second, width, height, False)
    _delta_decode(first, width, height, mirror)
    _xor_into(second, first, width, height, mirror)


_DECODERS = (_mode_0, _mode_1, _mode_2)


def read_rle_packet(bits: BitIterator) -> int:
    """Read one run-length packet and return the number of zero pairs it encodes."""
    length = 0
    count = 1
    while bits.next_bit():
        length = ((length | 1) << 1) & _WORD
        count += 1
    value = 0
    for _ in range(count):
        value = ((value << 1) | bits.next_bit()) & _WORD
    return (length + value + 1) & _WORD


def _read_pair(bits: BitIterator) -> int:
    high = bits.next_bit()
    return (high << 1) | bits.next_bit()


def _skip_zeros(zeros: int, row: int, index: int, height: int) -> tuple[int, int, int]:
    """Advance over ``zeros`` rows; return ``(row, index, zeros_left_over)``."""
    row += zeros
    left = row - height if row >= height else 0
    return row, index + zeros - left, left


def _process_column(
    plane: bytearray, start: int, bits: BitIterator, rle_zeros: int, group: int, height: int
) -> int:
    row, index, rle_zeros = _skip_zeros(rle_zeros, 0, start, height)
    while row < height:
        pair = _read_pair(bits)
        if pair == 0:
            rle_zeros += read_rle_packet(bits)
            row, index, rle_zeros = _skip_zeros(rle_zeros, row, index, height)
        else:
            plane[index] |= (pair << (2 * group)) & _BYTE
            index += 1
            row += 1
    return rle_zeros


def _fill_bitplane(plane: bytearray, width: int, height: int, bits: BitIterator) -> None:
    rle_zeros = 0 if bits.next_bit() else read_rle_packet(bits)
    for column in range(width):
        start = column * height
        for group in _BIT_GROUPS:
            rle_zeros = _process_column(plane, start, bits, rle_zeros, group, height)


def decompress_bitplane(dst: bytes, width: int, height: int, bits: BitIterator) -> bytes:
    """Decode one bitplane from ``bits`` on top of ``dst`` and return the result.

    The plane is stored column by column: ``width`` columns of ``height`` bytes.
    """
    plane = bytearray(dst)
    _fill_bitplane(plane, width, height, bits)
    return bytes(plane)


def _decode_in_place(
    first: bytearray,
    second: bytearray,
    width: int,
    height: int,
    mirror: bool,
    mode: int,
    invert: bool,
) -> None:
    if mode not in range(len(_DECODERS)):
        raise ValueError(f"decoding mode must be 0, 1 or 2, not {mode}")
    if invert:
        first, second = second, first
    _DECODERS[mode](first, second, width, height, mirror)


def decode_bitplanes(
    buffer_1: bytes,
    buffer_2: bytes,
    width: int,
    height: int,
    mirror: bool,
    mode: int,
    invert: bool,
) -> tuple[bytes, bytes]:
    """Apply delta/xor decoding ``mode`` to two planes; return them in input order."""
    first, second = bytearray(buffer_1), bytearray(buffer_2)
    _decode_in_place(first, second, width, height, mirror, mode, invert)
    return bytes(first), bytes(second)


def decompress_picture(compressed: bytes, size: int) -> tuple[bytes, bytes]:
    """Decompress a packed picture into two bitplanes of ``size`` bytes each."""
    if not compressed:
        raise ValueError("compressed picture is empty")
    dimensions = compressed[0]
    height = 8 * (dimensions & 0x0F)
    width = swap(dimensions) & 0x0F
    bits = BitIterator(bytes(compressed[1:]))

    planes = (bytearray(size), bytearray(size))
    use_first = not bits.next_bit()
    first_target, second_target = (planes[0], planes[1]) if use_first else (planes[1], planes[0])

    _fill_bitplane(first_target, width, height, bits)
    mode = bits.next_bit()
    if mode:
        mode += bits.next_bit()
    _fill_bitplane(second_target, width, height, bits)

    _decode_in_place(planes[0], planes[1], width, height, False, mode, not use_first)
    return bytes(planes[0]), bytes(planes[1])