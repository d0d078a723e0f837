"""Mapping internal species ids to dex numbers."""

DEXNUMS_DEX_ORDER_PTR = 0x41024


def dex_num_by_id(data: bytes, offset: int, pk_id: int) -> int:
    """Return the dex number of internal id ``pk_id``."""
    index = DEXNUMS_DEX_ORDER_PTR + offset + ((pk_id - 1) & 0xFF)
    if index < 0 or index >= len(data):
        raise IndexError(f"dex order entry at 0x{index:X} lies outside the data")
    return data[index]