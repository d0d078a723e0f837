"""Reading the dex data block: species name, size, weight and entry text."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from pkrom.ptrs import absolute_ptr

END_OF_DATA = 0x50
ENTRY_BREAK = 0x49

DEXINFO_INFOS_PTR = 0x447E
DEXINFO_INFOS_PTR_BANK = 0x10
DEXINFO_INFOS_PTR_ABSO = absolute_ptr(DEXINFO_INFOS_PTR_BANK, DEXINFO_INFOS_PTR)

DEX_INFO_LEN = 0x09

_LAYOUT = struct.Struct("<BBHBHBB")


@dataclass(frozen=True)
class DexInfo:
    """The fixed-size block that follows a species name."""

    feet: int
    inches: int
    weight: int
    always0x17: int
    dex_entry_ptr: int
    dex_entry_bank: int
    end_of_data: int

    @classmethod
    def from_bytes(cls, raw: bytes) -> DexInfo:
        """Parse the nine raw bytes of a dex info block."""
        if len(raw) != DEX_INFO_LEN:
            raise ValueError(f"a dex info block is {DEX_INFO_LEN} bytes, got {len(raw)}")
        return cls(*_LAYOUT.unpack(raw))


def _read(data: bytes, start: int, length: int) -> bytes:
    if start < 0 or start + length > len(data):
        raise IndexError(f"{length} bytes at 0x{start:X} lie outside the data")
    return bytes(data[start : start + length])


def _terminated_len(data: bytes, start: int) -> int:
    if start < 0 or start >= len(data):
        raise IndexError(f"offset 0x{start:X} lies outside the data")
    end = bytes(data).find(END_OF_DATA, start)
    if end < 0:
        raise ValueError(f"no end-of-data marker after offset 0x{start:X}")
    return end - start + 1


def dex_infos_ptr_by_id(data: bytes, offset: int, pk_id: int) -> tuple[int, int]:
    """Return ``(bank, pointer)`` of the dex info for internal id ``pk_id``."""
    index = DEXINFO_INFOS_PTR_ABSO + offset + 2 * ((pk_id - 1) & 0xFF)
    low, high = _read(data, index, 2)
    return DEXINFO_INFOS_PTR_BANK, (high << 8) | low


def species_name_len_by_ptr(data: bytes, offset: int, bank: int, infos_ptr: int) -> int:
    """Length of the species name, end-of-data marker included."""
    return _terminated_len(data, absolute_ptr(bank, infos_ptr) + offset)


def species_name_len_by_id(data: bytes, offset: int, pk_id: int) -> int:
    """Length of the species name of ``pk_id``, end-of-data marker included."""
    bank, infos_ptr = dex_infos_ptr_by_id(data, offset, pk_id)
    return species_name_len_by_ptr(data, offset, bank, infos_ptr)


def species_name_by_ptr(data: bytes, offset: int, bank: int, infos_ptr: int) -> bytes:
    """Encoded species name, end-of-data marker included."""
    length = species_name_len_by_ptr(data, offset, bank, infos_ptr)
    return _read(data, absolute_ptr(bank, infos_ptr) + offset, length)


def species_name_by_id(data: bytes, offset: int, pk_id: int) -> bytes:
    """Encoded species name of ``pk_id``, end-of-data marker included."""
    bank, infos_ptr = dex_infos_ptr_by_id(data, offset, pk_id)
    return species_name_by_ptr(data, offset, bank, infos_ptr)


def dex_info_bytes_by_ptr(data: bytes, offset: int, bank: int, infos_ptr: int) -> bytes:
    """The nine raw bytes that follow the species name."""
    length = species_name_len_by_ptr(data, offset, bank, infos_ptr)
    return _read(data, absolute_ptr(bank, infos_ptr) + offset + length, DEX_INFO_LEN)


def dex_info_bytes_by_id(data: bytes, offset: int, pk_id: int) -> bytes:
    """The nine raw dex info bytes of ``pk_id``."""
    bank, infos_ptr = dex_infos_ptr_by_id(data, offset, pk_id)
    return dex_info_bytes_by_ptr(data, offset, bank, infos_ptr)


def dex_info_by_ptr(data: bytes, offset: int, bank: int, infos_ptr: int) -> DexInfo:
    """The parsed dex info block at a banked pointer."""
    return DexInfo.from_bytes(dex_info_bytes_by_ptr(data, offset, bank, infos_ptr))


def dex_info_by_id(data: bytes, offset: int, pk_id: int) -> DexInfo:
    """The parsed dex info block of ``pk_id``."""
    bank, infos_ptr = dex_infos_ptr_by_id(data, offset, pk_id)
    return dex_info_by_ptr(data, offset, bank, infos_ptr)


def entries_len_by_ptr(data: bytes, offset: int, bank: int, entries_ptr: int) -> int:
    """Length of the dex entry text, delimiters included."""
    return _terminated_len(data, absolute_ptr(bank, entries_ptr) + offset)


def entries_len_by_id(data: bytes, offset: int, pk_id: int) -> int:
    """Length of the dex entry text of ``pk_id``, delimiters included."""
    info = dex_info_by_id(data, offset, pk_id)
    return entries_len_by_ptr(data, offset, info.dex_entry_bank, info.dex_entry_ptr)


def entries_by_ptr(data: bytes, offset: int, bank: int, entries_ptr: int) -> tuple[int, bytes]:
    """Return ``(first_entry_len, entries)`` for the entry text at a pointer.

    ``first_entry_len`` runs up to and including the last page-break byte,
    and is 0 when the text holds none.
    """
    length = entries_len_by_ptr(data, offset, bank, entries_ptr)
    entries = _read(data, absolute_ptr(bank, entries_ptr) + offset, length)
    return entries.rfind(ENTRY_BREAK) + 1, entries


def entries_by_id(data: bytes, offset: int, pk_id: int) -> tuple[int, bytes]:
    """Return ``(first_entry_len, entries)`` for the entry text of ``pk_id``."""
    info = dex_info_by_id(data, offset, pk_id)
    return entries_by_ptr(data, offset, info.dex_entry_bank, info.dex_entry_ptr)