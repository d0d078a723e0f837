"""Reading a byte string one bit at a time, most significant bit first."""

from __future__ import annotations

from dataclasses import dataclass

from pkrom.bitops import rlc


@dataclass
class BitIterator:
    """Walks over ``data`` yielding bits from the high end of each byte."""

    data: bytes
    byte_index: int = 0
    bit_index: int = 0
    actual_byte: int = 0

    def next_byte(self) -> int:
        """Return the next whole byte and advance past it."""
        if self.byte_index >= len(self.data):
            raise EOFError("no more bytes to read")
        byte = self.data[self.byte_index]
        self.byte_index += 1
        return byte

    def next_bit(self) -> int:
        """Return the next bit as 0 or 1."""
        if self.bit_index == 0:
            self.actual_byte = self.next_byte()
            self.bit_index = 8
        self.bit_index -= 1
        self.actual_byte = rlc(self.actual_byte)
        return self.actual_byte & 0x01