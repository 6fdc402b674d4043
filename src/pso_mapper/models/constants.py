"""Episode numbering, table geometry, and sentinel values.

Two episode numberings coexist. Map parsing uses the game's own numbering
(Episode IV is 3), while BattleParamEntry tables are addressed by a
zero-based file index (Episode IV is 2).
"""

from enum import IntEnum


class Episode(IntEnum):
    """Episode numbers as passed to the map parser."""
    EP1 = 1
    EP2 = 2
    EP4 = 3

    @property
    def table_index(self) -> int:
        """Zero-based index into BattleParamsIndex."""
        return self.value - 1


class Difficulty(IntEnum):
    NORMAL = 0
    HARD = 1
    VERY_HARD = 2
    ULTIMATE = 3


# BattleParamEntry geometry
BATTLE_PARAMS_ROW_SIZE = 0x24
BATTLE_PARAMS_TABLE_ROWS = 0x61     # monster types 0x00..0x60 inclusive
BATTLE_PARAMS_TABLE_SIZE = BATTLE_PARAMS_ROW_SIZE * BATTLE_PARAMS_TABLE_ROWS
TABLES_PER_FILE = 4                 # one per difficulty, ascending
EPISODE_TABLE_COUNT = 3             # episode indexes 0 (I), 1 (II), 2 (IV)

# Lookup bounds; the top values are reserved slots with no table behind them.
MAX_EPISODE_INDEX = 3
MAX_DIFFICULTY = 4
MAX_MONSTER_TYPE = 0x60

# Map entry geometry
ENEMY_ENTRY_SIZE = 0x48
RARE_FLAG_FIELD = 10                # index into EnemyEntry.reserved
RARE_FLAG_MASK = 0x0080_0000

# Sentinels
EXPERIENCE_UNKNOWN = 0xFFFF_FFFF    # unknown type: award no experience
RT_INDEX_UNKNOWN = 0
RT_INDEX_UNCLASSIFIED = 0xFF        # sub-variant not derivable from the entry
