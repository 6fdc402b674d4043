"""Parse BattleParamEntry*.dat files.

Each file holds 4 consecutive tables (difficulty 0..3), no header, no
padding. A table is 0x61 rows of 0x24 bytes:
  - 8 x uint16: atp, psv, evp, hp, dfp, ata, lck, esp
  - 12 opaque bytes
  - uint32 experience, uint32 difficulty
"""

from pathlib import Path

from pso_mapper.errors import BattleParamsLoadError
from pso_mapper.models.battle_params import BattleParams, BattleParamsTable
from pso_mapper.models.constants import (
    BATTLE_PARAMS_ROW_SIZE,
    BATTLE_PARAMS_TABLE_ROWS,
    BATTLE_PARAMS_TABLE_SIZE,
    TABLES_PER_FILE,
)
from pso_mapper.parser.binary_reader import BinaryReader


_EPISODE_SUFFIXES: dict[int, str] = {
    0: "",
    1: "_lab",
    2: "_ep4",
}


def battle_params_filename(prefix: str | Path, solo: bool, episode_index: int) -> str:
    """Return the file name for one (solo, episode) pair.

    >>> battle_params_filename("BattleParamEntry", False, 1)
    'BattleParamEntry_lab_on.dat'
    """
    try:
        suffix = _EPISODE_SUFFIXES[episode_index]
    except KeyError:
        raise ValueError(f"No BattleParamEntry file for episode index {episode_index}")
    mode = "" if solo else "_on"
    return f"{prefix}{suffix}{mode}.dat"


def parse_battle_params(reader: BinaryReader) -> BattleParams:
    """Parse one stat row from a reader bounded to 0x24 bytes."""
    return BattleParams(
        atp=reader.uint16(),
        psv=reader.uint16(),
        evp=reader.uint16(),
        hp=reader.uint16(),
        dfp=reader.uint16(),
        ata=reader.uint16(),
        lck=reader.uint16(),
        esp=reader.uint16(),
        unknown_a1=reader.bytes(12),
        experience=reader.uint32(),
        difficulty=reader.uint32(),
    )


def parse_battle_params_table(reader: BinaryReader) -> BattleParamsTable:
    """Parse one full table (all monster types) at the reader's cursor."""
    return tuple(
        parse_battle_params(reader.slice(BATTLE_PARAMS_ROW_SIZE))
        for _ in range(BATTLE_PARAMS_TABLE_ROWS)
    )


def parse_battle_params_file(
    data: bytes,
    source: str = "<bytes>",
) -> tuple[BattleParamsTable, ...]:
    """Parse the 4 per-difficulty tables of one file.

    Trailing bytes after the fourth table are ignored.

    Raises:
        BattleParamsLoadError: If the data is shorter than 4 tables.
    """
    expected = BATTLE_PARAMS_TABLE_SIZE * TABLES_PER_FILE
    if len(data) < expected:
        raise BattleParamsLoadError(
            f"{source}: expected at least {expected:#x} bytes "
            f"({TABLES_PER_FILE} tables), got {len(data):#x}"
        )
    reader = BinaryReader(data)
    return tuple(
        parse_battle_params_table(reader.slice(BATTLE_PARAMS_TABLE_SIZE))
        for _ in range(TABLES_PER_FILE)
    )


def load_battle_params_file(path: Path) -> tuple[BattleParamsTable, ...]:
    """Read and parse one file. A missing file raises FileNotFoundError."""
    return parse_battle_params_file(path.read_bytes(), source=str(path))
