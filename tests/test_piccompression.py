import pytest

from pkrom.bititer import BitIterator
from pkrom.piccompression import (
    decode_bitplanes,
    decompress_bitplane,
    decompress_picture,
    delta_decode_byte,
    mirror_both_nibbles,
    mirror_nibble,
    read_rle_packet,
)


@pytest.mark.parametrize(
    "byte, last_bit, mirror, expected",
    [
        (0xC0, 0, False, (0x80, 0)),
        (0x80, 0, False, (0xFF, 1)),
        (0x01, 0, False, (0x01, 1)),
        (0x01, 0, True, (0x08, 1)),
        (0x00, 1, False, (0xFF, 1)),
    ],
)
def test_delta_decode_byte(byte, last_bit, mirror, expected):
    assert delta_decode_byte(byte, last_bit, mirror) == expected


def test_delta_decode_byte_rejects_bad_last_bit():
    with pytest.raises(ValueError):
        delta_decode_byte(0x00, 2, False)


def test_mirror_nibble():
    assert mirror_nibble(0b0001) == 0b1000
    assert mirror_nibble(0b0011) == 0b1100
    assert mirror_nibble(0b0110) == 0b0110


def test_mirror_both_nibbles():
    assert mirror_both_nibbles(0x12) == 0x84
    assert mirror_both_nibbles(mirror_both_nibbles(0x5C)) == 0x5C


def test_read_rle_packet_shortest():
    assert read_rle_packet(BitIterator(bytes([0x00]))) == 1


def test_read_rle_packet_longer():
    assert read_rle_packet(BitIterator(bytes([0xF0, 0x40]))) == 32


def test_decompress_bitplane_single_pair():
    # datapacket mode, pair 11, then a zero pair and a run of 31 zeros
    bits = BitIterator(bytes([0b11100111, 0b10000000]))
    result = decompress_bitplane(bytes(8), 1, 8, bits)
    assert result == bytes([0xC0]) + bytes(7)


def test_decompress_bitplane_keeps_existing_bits():
    bits = BitIterator(bytes([0b11100111, 0b10000000]))
    result = decompress_bitplane(bytes([0x01, 0, 0, 0, 0, 0, 0, 0x02]), 1, 8, bits)
    assert result == bytes([0xC1, 0, 0, 0, 0, 0, 0, 0x02])


def test_decode_mode_0_carries_across_columns():
    first, second = decode_bitplanes(bytes([0x01, 0x00]), bytes(2), 2, 1, False, 0, False)
    assert first == bytes([0x01, 0xFF])
    assert second == bytes(2)


def test_decode_mode_1():
    assert decode_bitplanes(b"\xc0", b"\x00", 1, 1, False, 1, False) == (b"\x80", b"\x80")


def test_decode_mode_2():
    assert decode_bitplanes(b"\xc0", b"\x80", 1, 1, False, 2, False) == (b"\x80", b"\x7f")


def test_decode_inverted_buffers():
    assert decode_bitplanes(b"\x01", b"\xc0", 1, 1, False, 1, True) == (b"\x81", b"\x80")


def test_decode_bad_mode():
    with pytest.raises(ValueError):
        decode_bitplanes(b"\x00", b"\x00", 1, 1, False, 3, False)


def test_decompress_blank_picture():
    assert decompress_picture(bytes([0x11, 0x3C, 0x13, 0xC1]), 16) == (bytes(16), bytes(16))


def test_decompress_picture_first_buffer():
    compressed = bytes([0x11, 0x73, 0xC0, 0x3C, 0x10])
    assert decompress_picture(compressed, 8) == (bytes([0x80]) + bytes(7), bytes(8))


def test_decompress_picture_second_buffer_first():
    compressed = bytes([0x11, 0xF3, 0xC0, 0x3C, 0x10])
    assert decompress_picture(compressed, 8) == (bytes(8), bytes([0x80]) + bytes(7))


def test_decompress_truncated_stream():
    with pytest.raises(EOFError):
        decompress_picture(bytes([0x11]), 8)


def test_decompress_empty_input():
    with pytest.raises(ValueError):
        decompress_picture(b"", 8)