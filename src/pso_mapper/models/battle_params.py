"""Per-monster-type combat stats from BattleParamEntry files."""

import logging
from dataclasses import dataclass
from pathlib import Path

from pso_mapper.errors import BattleParamsLookupError
from pso_mapper.models.constants import (
    BATTLE_PARAMS_TABLE_ROWS,
    EPISODE_TABLE_COUNT,
    MAX_DIFFICULTY,
    MAX_EPISODE_INDEX,
    MAX_MONSTER_TYPE,
    TABLES_PER_FILE,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BattleParams:
    """One 0x24-byte stat row. Only experience is used for map parsing."""
    atp: int            # attack power
    psv: int            # perseverance
    evp: int            # evasion
    hp: int
    dfp: int            # defense
    ata: int            # accuracy
    lck: int            # luck
    esp: int
    unknown_a1: bytes   # 12 opaque bytes
    experience: int
    difficulty: int


# Exactly BATTLE_PARAMS_TABLE_ROWS rows, indexed by monster type.
BattleParamsTable = tuple[BattleParams, ...]


class BattleParamsIndex:
    """All BattleParamEntry tables, indexed by (solo, episode, difficulty).

    Built once at startup and never mutated; safe to share between threads
    once construction has returned. Use from_prefix() to load from disk.
    """

    __slots__ = ("_tables",)

    def __init__(self, tables: tuple[tuple[tuple[BattleParamsTable, ...], ...], ...]) -> None:
        # tables[is_solo][episode_index][difficulty]
        if len(tables) != 2 or any(len(episodes) != EPISODE_TABLE_COUNT for episodes in tables):
            raise ValueError("tables must be a 2 x 3 grid of per-difficulty tables")
        for episodes in tables:
            for per_difficulty in episodes:
                if len(per_difficulty) != TABLES_PER_FILE:
                    raise ValueError(f"each grid cell needs {TABLES_PER_FILE} tables")
                for table in per_difficulty:
                    if len(table) != BATTLE_PARAMS_TABLE_ROWS:
                        raise ValueError(
                            f"tables must have {BATTLE_PARAMS_TABLE_ROWS:#x} rows, "
                            f"got {len(table):#x}"
                        )
        self._tables = tables

    @classmethod
    def from_prefix(cls, prefix: str | Path) -> "BattleParamsIndex":
        """Load all six files named by battle_params_filename()."""
        from pso_mapper.parser.battle_params_parser import (
            battle_params_filename,
            load_battle_params_file,
        )

        grid = []
        for is_solo in (False, True):
            episodes = []
            for episode_index in range(EPISODE_TABLE_COUNT):
                path = Path(battle_params_filename(prefix, is_solo, episode_index))
                episodes.append(load_battle_params_file(path))
                logger.debug("Loaded battle params from %s", path)
            grid.append(tuple(episodes))
        return cls(tuple(grid))

    @staticmethod
    def _check_range(episode: int, difficulty: int) -> None:
        if not 0 <= episode <= MAX_EPISODE_INDEX:
            raise BattleParamsLookupError("incorrect episode")
        if not 0 <= difficulty <= MAX_DIFFICULTY:
            raise BattleParamsLookupError("incorrect difficulty")

    def get_subtable(self, solo: bool, episode: int, difficulty: int) -> BattleParamsTable:
        """Return the whole table for one (solo, episode index, difficulty)."""
        self._check_range(episode, difficulty)
        if episode >= EPISODE_TABLE_COUNT or difficulty >= TABLES_PER_FILE:
            raise BattleParamsLookupError(
                f"no table loaded for episode {episode}, difficulty {difficulty}"
            )
        return self._tables[1 if solo else 0][episode][difficulty]

    def get(self, solo: bool, episode: int, difficulty: int, monster_type: int) -> BattleParams:
        """Return one stat row. Never clamps out-of-range arguments."""
        self._check_range(episode, difficulty)
        if not 0 <= monster_type <= MAX_MONSTER_TYPE:
            raise BattleParamsLookupError("incorrect monster type")
        return self.get_subtable(solo, episode, difficulty)[monster_type]
