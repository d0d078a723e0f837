# pkrom

Tools for reading data out of a first-generation Game Boy monster-collecting
ROM image: species names, dex numbers, dex entries, base stats, and the
compressed front and back pictures, which can be written out as 2-bit indexed
BMP files.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Extracting pictures

```
pkrom-extract ROM_FILE PK_ID
```

`PK_ID` is the internal species id, given as a decimal number (only its
leading digits are read, and the value is taken modulo 256). The command
prints what it finds (dex number, name, stats pointer, ROM bank and picture
pointers) and writes two bitmaps to the current directory, named
`DEX - 0xID - NAME - front.bmp` and `DEX - 0xID - NAME - back.bmp`, where
`DEX` is the three-digit dex number and `ID` the internal id in hex.

With fewer than two arguments it prints a usage line and exits with status
255. A ROM file that cannot be opened gives the system error number as exit
status; an id that does not start with a digit gives 255.

The same work is available from Python:

```python
from pkrom.fileio import read_file
from pkrom.extractor import extract_pic

rom = read_file("game.gb")
front_path, back_path = extract_pic(rom, 0x54, out_dir="pictures")
```

## Using the library

```python
from pkrom.fileio import read_file
from pkrom.dexnumbers import dex_num_by_id
from pkrom.stats import stats_by_dex
from pkrom.extractor import pk_name

rom = read_file("game.gb")

pk_id = 0x54
dex = dex_num_by_id(rom, 0, pk_id)
print(dex, pk_name(rom, pk_id))

stats = stats_by_dex(rom, dex)
print(stats.base_stats.hp, stats.sprite_ptrs.front_sprite_ptr)
```

Reads outside the ROM data raise `IndexError`; a text block without its
end-of-data byte raises `ValueError`.

The modules in the package:

- `pkrom.bitops`: `rlc`, `rrc`, `swap` and `bit` on single bytes.
- `pkrom.bititer`: `BitIterator`, which reads a byte string most significant bit first and raises `EOFError` at its end.
- `pkrom.ptrs`: `absolute_ptr` (banked address to ROM offset) and `fetch16`.
- `pkrom.text`: `char_as_ascii`, `to_ascii` and `ascii_length` for the game's character encoding; unknown codes become `"(nil)"`.
- `pkrom.numbers`: `str_to_number`, which reads the leading decimal digits of a string.
- `pkrom.fileio`: `file_size`, `stream_size`, `read_file` and `write_file`.
- `pkrom.dexinfo`: `DexInfo` records (height, weight, entry pointer), species names and dex entry text, by pointer or by internal id.
- `pkrom.dexnumbers`: `dex_num_by_id`, from internal id to dex number.
- `pkrom.names`: `names_ptr` and `name_by_id` for the fixed-width species name table.
- `pkrom.stats`: `SpeciesStats` and its parts (`BaseStats`, `SpritePointers`, `Lvl1Moves`, `TmHmFlags`), the `PkType` enum, and `stats_ptr` / `stats_by_dex`.
- `pkrom.bankswitch`: `rom_bank_by_pk_id`, the ROM bank that holds each species' pictures.
- `pkrom.piccompression`: `decompress_picture` and the pieces it is built from (`decompress_bitplane`, `decode_bitplanes`, `read_rle_packet`, `delta_decode_byte`).
- `pkrom.boundingbox`: `add_bounding_box`, which places both planes bottom-centred in the tile frame and interleaves them.
- `pkrom.bitplanes`: `merge_bitplanes` and `mix_pair`, interleaving two bitplanes into 2-bit pixels.
- `pkrom.pixelorder`: `row_to_column_order`, which moves tile data into its image position.
- `pkrom.bmp`: `bit_indexed_bmp` and `write_bit_indexed_bmp` for palette BMP images.
- `pkrom.extractor`: `pk_name`, `outfile_name`, `pic_ptrs`, `extract_picture`, `extract_pic` and `main`, behind the `pkrom-extract` command.

## What it does not do

- It only reads: there is no picture compression, and nothing is written back
  into a ROM image.
- Pictures are written as BMP only, with a fixed four-colour palette and the
  7×7-tile frame.
- Picture banks follow the non-Yellow layout; there is no option to switch it.
- The command extracts one species per run.