"""Synthetic map entries and battle params tables for tests."""

import struct
from pathlib import Path

from pso_mapper.models.battle_params import BattleParams
from pso_mapper.models.constants import BATTLE_PARAMS_TABLE_ROWS, RARE_FLAG_MASK
from pso_mapper.parser.battle_params_parser import battle_params_filename


ENTRY_FORMAT = "<IHH11IfIIII"
ROW_FORMAT = "<8H12sII"

# Experience encodes the row index so tests can see which row was chosen.
EXP_BASE = 1000


def pack_entry(
    base: int,
    *,
    num_clones: int = 0,
    skin: int = 0,
    rare: bool = False,
    reserved0: int = 0,
) -> bytes:
    reserved = [0] * 11
    if rare:
        reserved[10] = RARE_FLAG_MASK
    return struct.pack(
        ENTRY_FORMAT, base, reserved0, num_clones, *reserved, 0.0, 0, 0, skin, 0
    )


def exp_for(stat_index: int) -> int:
    return EXP_BASE + stat_index


def make_table(offset: int = 0) -> tuple[BattleParams, ...]:
    return tuple(
        BattleParams(
            atp=i, psv=0, evp=0, hp=10 * i, dfp=0, ata=0, lck=0, esp=0,
            unknown_a1=bytes(12), experience=exp_for(i) + offset, difficulty=0,
        )
        for i in range(BATTLE_PARAMS_TABLE_ROWS)
    )


def pack_table(marker: int) -> bytes:
    """One on-disk table; hp carries `marker`, experience the row index."""
    return b"".join(
        struct.pack(ROW_FORMAT, i, 0, 0, marker, 0, 0, 0, 0, bytes(12), exp_for(i), marker)
        for i in range(BATTLE_PARAMS_TABLE_ROWS)
    )


def write_battle_params_files(prefix: Path) -> None:
    """Write all six files; marker = solo * 100 + episode * 10 + difficulty."""
    for solo in (False, True):
        for episode_index in range(3):
            data = b"".join(
                pack_table(int(solo) * 100 + episode_index * 10 + difficulty)
                for difficulty in range(4)
            )
            Path(battle_params_filename(prefix, solo, episode_index)).write_bytes(data)
