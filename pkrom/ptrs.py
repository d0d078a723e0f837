"""Banked ROM pointer helpers."""

BANK_SIZE = 0x4000


def absolute_ptr(bank: int, relative_ptr: int) -> int:
    """Turn a banked address into an offset within the ROM image.

    Addresses below ``BANK_SIZE`` lie in the fixed home bank and are
    returned unchanged; the others are placed in the switchable ``bank``.
    """
    relative_ptr &= 0xFFFF
    if relative_ptr < BANK_SIZE:
        return relative_ptr
    bank = (bank - 1) & 0xFF
    return bank * BANK_SIZE + relative_ptr


def fetch16(data: bytes, high: int, low: int) -> int:
    """Combine the bytes at ``high`` and ``low`` into one 16-bit value."""
    return (data[high] << 8) | data[low]