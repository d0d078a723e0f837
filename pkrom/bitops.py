"""Single-byte rotate, swap and bit-test helpers."""

_BYTE = 0xFF


def rlc(number: int) -> int:
    """Rotate an 8-bit value left by one, wrapping bit 7 into bit 0."""
    number &= _BYTE
    return ((number & 0x7F) << 1) | ((number & 0x80) >> 7)


def rrc(number: int) -> int:
    """Rotate an 8-bit value right by one, wrapping bit 0 into bit 7."""
    number &= _BYTE
    return ((number & 0xFE) >> 1) | ((number & 0x01) << 7)


def swap(number: int) -> int:
    """Exchange the two nibbles of an 8-bit value."""
    number &= _BYTE
    return ((number & 0x0F) << 4) | ((number & 0xF0) >> 4)


def bit(number: int, bit_i: int) -> int:
    """Return bit ``bit_i`` of ``number`` as 0 or 1."""
    return (number >> bit_i) & 0x01