import pytest

from pkrom.dexinfo import (
    DEXINFO_INFOS_PTR_ABSO,
    DexInfo,
    dex_info_by_id,
    dex_info_by_ptr,
    dex_info_bytes_by_id,
    dex_info_bytes_by_ptr,
    dex_infos_ptr_by_id,
    entries_by_id,
    entries_by_ptr,
    entries_len_by_id,
    entries_len_by_ptr,
    species_name_by_id,
    species_name_by_ptr,
    species_name_len_by_id,
    species_name_len_by_ptr,
)
from pkrom.text import to_ascii

ROM_SIZE = 0x48000
NAME_PTR = 0x4100
NAME_ABS = 0x40100
ENTRY_BANK = 0x11
ENTRY_PTR = 0x4200
ENTRY_ABS = 0x44200
NAME = bytes([0x80, 0x81, 0x82, 0x50])
INFO = bytes([3, 7, 0x2C, 0x01, 0x17, ENTRY_PTR & 0xFF, ENTRY_PTR >> 8, ENTRY_BANK, 0x50])
ENTRIES = bytes([0x80, 0xE8, 0x49, 0x81, 0xE8, 0x50])


def make_rom(pk_id=1, entries=ENTRIES):
    rom = bytearray(ROM_SIZE)
    slot = 0x4047E + 2 * ((pk_id - 1) & 0xFF)
    rom[slot : slot + 2] = NAME_PTR.to_bytes(2, "little")
    rom[NAME_ABS : NAME_ABS + len(NAME)] = NAME
    rom[NAME_ABS + len(NAME) : NAME_ABS + len(NAME) + len(INFO)] = INFO
    rom[ENTRY_ABS : ENTRY_ABS + len(entries)] = entries
    return bytes(rom)


def test_infos_table_address():
    assert DEXINFO_INFOS_PTR_ABSO == 0x4047E
    rom = bytearray(0x4047E + 2)
    rom[0x4047E : 0x4047E + 2] = b"\x34\x12"
    assert dex_infos_ptr_by_id(bytes(rom), 0, 1) == (0x10, 0x1234)


def test_infos_ptr_by_id():
    assert dex_infos_ptr_by_id(make_rom(), 0, 1) == (0x10, NAME_PTR)


def test_infos_ptr_id_zero_wraps_to_last_slot():
    assert dex_infos_ptr_by_id(make_rom(pk_id=0), 0, 0) == (0x10, NAME_PTR)


def test_species_name():
    rom = make_rom()
    assert species_name_len_by_id(rom, 0, 1) == len(NAME)
    assert species_name_by_id(rom, 0, 1) == NAME
    assert species_name_by_ptr(rom, 0, 0x10, NAME_PTR) == NAME
    assert species_name_len_by_ptr(rom, 0, 0x10, NAME_PTR) == 4
    assert to_ascii(species_name_by_id(rom, 0, 1)) == "ABC"


def test_dex_info_bytes():
    rom = make_rom()
    assert dex_info_bytes_by_id(rom, 0, 1) == INFO
    assert dex_info_bytes_by_ptr(rom, 0, 0x10, NAME_PTR) == INFO


def test_dex_info_struct():
    info = dex_info_by_id(make_rom(), 0, 1)
    assert info == DexInfo(
        feet=3,
        inches=7,
        weight=0x012C,
        always0x17=0x17,
        dex_entry_ptr=ENTRY_PTR,
        dex_entry_bank=ENTRY_BANK,
        end_of_data=0x50,
    )
    assert dex_info_by_ptr(make_rom(), 0, 0x10, NAME_PTR) == info


def test_entries():
    rom = make_rom()
    assert entries_len_by_id(rom, 0, 1) == len(ENTRIES)
    assert entries_len_by_ptr(rom, 0, ENTRY_BANK, ENTRY_PTR) == 6
    assert entries_by_id(rom, 0, 1) == (3, ENTRIES)
    assert entries_by_ptr(rom, 0, ENTRY_BANK, ENTRY_PTR) == (3, ENTRIES)


def test_entries_without_break():
    plain = bytes([0x80, 0x81, 0x50])
    assert entries_by_id(make_rom(entries=plain), 0, 1) == (0, plain)


def test_offset_shifts_every_read():
    prefix = b"\xff" * 32
    rom = prefix + make_rom()
    assert dex_infos_ptr_by_id(rom, 32, 1) == (0x10, NAME_PTR)
    assert species_name_by_id(rom, 32, 1) == NAME
    assert dex_info_bytes_by_id(rom, 32, 1) == INFO
    assert entries_by_id(rom, 32, 1) == (3, ENTRIES)


def test_missing_terminator_raises():
    with pytest.raises(ValueError):
        species_name_len_by_ptr(b"\x01\x02\x03", 0, 0, 0)


def test_truncated_data_raises():
    with pytest.raises(IndexError):
        dex_infos_ptr_by_id(b"", 0, 1)


def test_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        DexInfo.from_bytes(b"\x00" * 8)