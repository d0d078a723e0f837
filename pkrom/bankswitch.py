"""ROM bank holding a species' picture data."""


def rom_bank_by_pk_id(pk_id: int, y_mode: bool = False) -> int:
    """Return the ROM bank that stores the pictures for internal id ``pk_id``."""
    if not y_mode and pk_id == 0x15:
        return 0x01
    if pk_id == 0xB6:
        return 0x0B
    if pk_id < 0x1F:
        return 0x09
    if pk_id < 0x4A:
        return 0x0A
    if pk_id < 0x74:
        return 0x0B
    if pk_id < 0x99:
        return 0x0C
    return 0x0D