"""Reading species base-stats entries."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

from pkrom.ptrs import absolute_ptr, fetch16

PKSTATS_PTR_TO_BANKNO = 0x153B
PKSTATS_PTR_TO_STATSPTR_LOW = 0x1578
PKSTATS_PTR_TO_STATSPTR_HIGH = 0x1579

PKSTATS_PTR_TO_BANKNO_151 = 0x159C
PKSTATS_PTR_TO_STATSPTR_151_LOW = 0x1593
PKSTATS_PTR_TO_STATSPTR_151_HIGH = 0x1594

PKSTATS_STATS_ENTRY_LEN = 0x1C

_LAYOUT = struct.Struct("<11B2H13B")


class PkType(IntEnum):
    NORMAL = 0x00
    FIGHTING = 0x01
    FLYING = 0x02
    POISON = 0x03
    GROUND = 0x04
    ROCK = 0x05
    BIRD = 0x06
    BUG = 0x07
    GHOST = 0x08
    FIRE = 0x14
    WATER = 0x15
    GRASS = 0x16
    ELECTRIC = 0x17
    PSYCHIC = 0x18
    ICE = 0x19
    DRAGON = 0x1A


@dataclass(frozen=True)
class BaseStats:
    hp: int
    attack: int
    defense: int
    speed: int
    special: int


@dataclass(frozen=True)
class SpritePointers:
    dim_front_sprite: int
    front_sprite_ptr: int
    back_sprite_ptr: int


@dataclass(frozen=True)
class Lvl1Moves:
    move0: int
    move1: int
    move2: int
    move3: int


@dataclass(frozen=True)
class TmHmFlags:
    flag0: int
    flag1: int
    flag2: int
    flag3: int
    flag4: int
    flag5: int
    flag6: int
    flag7: int


@dataclass(frozen=True)
class SpeciesStats:
    """One parsed base-stats entry."""

    dex_id: int
    base_stats: BaseStats
    type1: int
    type2: int
    catch_rate: int
    base_exp_yield: int
    sprite_ptrs: SpritePointers
    lvl1_moves: Lvl1Moves
    growth_rate: int
    tm_hm_flags: TmHmFlags

    @classmethod
    def from_bytes(cls, raw: bytes) -> SpeciesStats:
        """Parse the 28 raw bytes of a base-stats entry."""
        if len(raw) != PKSTATS_STATS_ENTRY_LEN:
            raise ValueError(
                f"a stats entry is {PKSTATS_STATS_ENTRY_LEN} bytes, got {len(raw)}"
            )
        values = _LAYOUT.unpack(raw)
        dex_id = values[0]
        base = BaseStats(*values[1:6])
        type1, type2, catch_rate, exp_yield, dim = values[6:11]
        front, back = values[11:13]
        moves = Lvl1Moves(*values[13:17])
        growth_rate = values[17]
        flags = TmHmFlags(*values[18:26])
        return cls(
            dex_id=dex_id,
            base_stats=base,
            type1=type1,
            type2=type2,
            catch_rate=catch_rate,
            base_exp_yield=exp_yield,
            sprite_ptrs=SpritePointers(dim, front, back),
            lvl1_moves=moves,
            growth_rate=growth_rate,
            tm_hm_flags=flags,
        )


def stats_ptr(data: bytes, dex_number: int) -> int:
    """Absolute offset of the base-stats entry for ``dex_number``.

    Dex number 151 is stored apart from the main table.
    """
    if dex_number == 151:
        bank = data[PKSTATS_PTR_TO_BANKNO_151]
        ptr = fetch16(data, PKSTATS_PTR_TO_STATSPTR_151_HIGH, PKSTATS_PTR_TO_STATSPTR_151_LOW)
        return absolute_ptr(bank, ptr)
    index = (dex_number - 1) & 0xFF
    bank = data[PKSTATS_PTR_TO_BANKNO]
    ptr = fetch16(data, PKSTATS_PTR_TO_STATSPTR_HIGH, PKSTATS_PTR_TO_STATSPTR_LOW)
    return absolute_ptr(bank, ptr) + index * PKSTATS_STATS_ENTRY_LEN


def stats_bytes_by_ptr(data: bytes, ptr: int) -> bytes:
    """The raw base-stats entry at absolute offset ``ptr``."""
    if ptr < 0 or ptr + PKSTATS_STATS_ENTRY_LEN > len(data):
        raise IndexError(f"stats entry at 0x{ptr:X} lies outside the data")
    return bytes(data[ptr : ptr + PKSTATS_STATS_ENTRY_LEN])


def stats_bytes_by_dex(data: bytes, dex_number: int) -> bytes:
    """The raw base-stats entry for ``dex_number``."""
    return stats_bytes_by_ptr(data, stats_ptr(data, dex_number))


def stats_by_dex(data: bytes, dex_number: int) -> SpeciesStats:
    """The parsed base-stats entry for ``dex_number``."""
    return SpeciesStats.from_bytes(stats_bytes_by_dex(data, dex_number))