"""Reading fixed-width species names."""

from pkrom.ptrs import absolute_ptr

PKNAMES_BANK = 0x07
PKNAMES_PTR_TO_NAMES_LOW = 0x2FAE
PKNAMES_PTR_TO_NAMES_HIGH = 0x2FAF
PKNAMES_NAME_LEN = 0x0A


def names_ptr(data: bytes, offset: int) -> int:
    """Absolute offset of the species name table."""
    low_index = PKNAMES_PTR_TO_NAMES_LOW + offset
    high_index = PKNAMES_PTR_TO_NAMES_HIGH + offset
    if low_index < 0 or high_index >= len(data):
        raise IndexError("name table pointer lies outside the data")
    ptr = data[low_index] | (data[high_index] << 8)
    return absolute_ptr(PKNAMES_BANK, ptr)


def name_by_id(data: bytes, offset: int, names_ptr: int, pk_id: int) -> bytes:
    """The ten encoded bytes of the name of internal id ``pk_id``."""
    start = names_ptr + ((pk_id - 1) & 0xFF) * PKNAMES_NAME_LEN + offset
    if start < 0 or start + PKNAMES_NAME_LEN > len(data):
        raise IndexError(f"name at 0x{start:X} lies outside the data")
    return bytes(data[start : start + PKNAMES_NAME_LEN])