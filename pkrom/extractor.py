"""Extracting a species' front and back pictures from a ROM image as BMP files."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import NamedTuple

from pkrom.bankswitch import rom_bank_by_pk_id
from pkrom.bitplanes import merge_bitplanes
from pkrom.bmp import write_bit_indexed_bmp
from pkrom.boundingbox import add_bounding_box
from pkrom.dexnumbers import dex_num_by_id
from pkrom.fileio import read_file
from pkrom.names import PKNAMES_NAME_LEN, name_by_id, names_ptr
from pkrom.numbers import str_to_number
from pkrom.piccompression import decompress_picture
from pkrom.pixelorder import row_to_column_order
from pkrom.ptrs import absolute_ptr
from pkrom.stats import stats_by_dex, stats_ptr
from pkrom.text import ascii_length, to_ascii

BUFFER_SIZE = 0x188
Y_MODE = False
BACK_BOUNDING_BOX = 0x44

TILES_PER_ROW = 7
TILES_PER_COLUMN = 7
BYTES_PER_TILE = 8
BITS_PER_PIXEL = 2

COLORS = (0xFFFFFF, 0x1E1611 * 8, 0x100E13 * 8, 0)

_NAME_LIMIT = 63
_FILENAME_LIMIT = 1023
_PROG = "pkrom-extract"


def _underline(text: str) -> str:
    return f"\x1b[4m{text}\x1b[0m"


class _PictureInfo(NamedTuple):
    stats_ptr: int
    bank: int
    front_sprite_ptr: int
    back_sprite_ptr: int
    dim_front: int
    front_ptr: int
    back_ptr: int


def _picture_info(rom: bytes, pk_id: int, dex_num: int) -> _PictureInfo:
    species = stats_by_dex(rom, dex_num)
    sprites = species.sprite_ptrs
    bank = rom_bank_by_pk_id(pk_id, Y_MODE)
    return _PictureInfo(
        stats_ptr=stats_ptr(rom, dex_num),
        bank=bank,
        front_sprite_ptr=sprites.front_sprite_ptr,
        back_sprite_ptr=sprites.back_sprite_ptr,
        dim_front=sprites.dim_front_sprite,
        front_ptr=absolute_ptr(bank, sprites.front_sprite_ptr),
        back_ptr=absolute_ptr(bank, sprites.back_sprite_ptr),
    )


def pk_name(rom: bytes, pk_id: int) -> str:
    """Decoded name of internal id ``pk_id``."""
    raw = name_by_id(rom, 0, names_ptr(rom, 0), pk_id)
    length = ascii_length(raw[:PKNAMES_NAME_LEN])
    name = to_ascii(raw[:length])
    encoded = name.encode("utf-8")[:_NAME_LIMIT]
    return encoded.decode("utf-8", errors="ignore")


def outfile_name(pk_id: int, dex_num: int, name: str, extra: str) -> str:
    """File name of an extracted picture, e.g. ``"004 - 0x01 - NAME - front.bmp"``."""
    text = f"{dex_num:03d} - 0x{pk_id:02X} - {name} - {extra}.bmp"
    return text[:_FILENAME_LIMIT]


def pic_ptrs(rom: bytes, pk_id: int, dex_num: int) -> tuple[int, int, int]:
    """Return ``(front_dimensions, front_ptr, back_ptr)`` for a species' pictures."""
    info = _picture_info(rom, pk_id, dex_num)
    return info.dim_front, info.front_ptr, info.back_ptr


def extract_picture(
    picture: bytes,
    bounding_box_size: int,
    tiles_per_row: int = TILES_PER_ROW,
    tiles_per_column: int = TILES_PER_COLUMN,
    bytes_per_tile: int = BYTES_PER_TILE,
    bits_per_pixel: int = BITS_PER_PIXEL,
) -> bytes:
    """Decompress a packed picture into column-ordered 2-bit pixel rows."""
    plane0, plane1 = decompress_picture(picture, BUFFER_SIZE)
    framed = add_bounding_box(
        plane0, plane1, bounding_box_size, tiles_per_row, tiles_per_column, bytes_per_tile
    )
    merged = merge_bitplanes(framed)
    return row_to_column_order(
        merged, tiles_per_row, tiles_per_column, bytes_per_tile, bits_per_pixel
    )


def _make_image(
    path: Path,
    image: bytes,
    tiles_per_row: int,
    tiles_per_column: int,
    bytes_per_tile: int,
    bits_per_pixel: int,
) -> None:
    width = bytes_per_tile * tiles_per_row
    height = bytes_per_tile * tiles_per_column
    write_bit_indexed_bmp(path, image, bits_per_pixel, width, -height, COLORS)


def extract_pic(
    rom: bytes, pk_id: int, out_dir: str | os.PathLike = "."
) -> tuple[Path, Path]:
    """Write the front and back pictures of ``pk_id`` into ``out_dir``.

    Returns the paths of the front and back images.
    """
    print(f"pk_id: 0x{pk_id:02X}")

    dex_num = dex_num_by_id(rom, 0, pk_id)
    print(f"dex_num: 0x{dex_num:02X}")

    name = pk_name(rom, pk_id)
    print(f"name: {name}")

    directory = Path(out_dir)
    front_path = directory / outfile_name(pk_id, dex_num, name, "front")
    back_path = directory / outfile_name(pk_id, dex_num, name, "back")

    info = _picture_info(rom, pk_id, dex_num)
    print(f"stats_ptr: 0x{info.stats_ptr:04X}")
    print(f"bank: 0x{info.bank}")
    print(f"frontSpritePtr: 0x{info.front_sprite_ptr:04X}")
    print(f"backSpritePtr:  0x{info.back_sprite_ptr:04X}")
    print(f"dimFrontSprite: 0x{info.dim_front:02X}")
    print(f"frontPtr:       0x{info.front_ptr:X}")
    print(f"backPtr:        0x{info.back_ptr:X}")

    layout = (TILES_PER_ROW, TILES_PER_COLUMN, BYTES_PER_TILE, BITS_PER_PIXEL)

    front = extract_picture(rom[info.front_ptr :], info.dim_front, *layout)
    print(f"front image: {front_path}")
    _make_image(front_path, front, *layout)

    back = extract_picture(rom[info.back_ptr :], BACK_BOUNDING_BOX, *layout)
    print(f"back image: {back_path}")
    _make_image(back_path, back, *layout)

    print()
    return front_path, back_path


def main(argv: list[str] | None = None) -> int:
    """Extract the pictures of one species: ``rom_file pk_id``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print(f"Usage: {_PROG} {_underline('rom_file')} {_underline('pk_id')}")
        return 255

    try:
        rom = read_file(args[0])
    except OSError as exc:
        print(f"errno {exc.errno}: {exc.strerror}", file=sys.stderr)
        return exc.errno or 1

    try:
        pk_id = str_to_number(args[1]) & 0xFF
    except (ValueError, OverflowError) as exc:
        print(exc, file=sys.stderr)
        return 255

    extract_pic(rom, pk_id)
    return 0