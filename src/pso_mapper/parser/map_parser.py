"""Parse map files into the ordered list of enemies for a game instance.

A map file is a flat array of 0x48-byte entries with no header or footer.
Enemy order matters: rooms and wave triggers refer to enemies by spawn
position, so entries, escorts and clones are emitted strictly in file order.
"""

import logging
from collections.abc import Iterator

from pso_mapper.errors import MapFormatError
from pso_mapper.ids import EnemyIdAllocator, default_id_allocator
from pso_mapper.models.battle_params import BattleParamsTable
from pso_mapper.models.constants import (
    ENEMY_ENTRY_SIZE,
    EXPERIENCE_UNKNOWN,
    RT_INDEX_UNKNOWN,
)
from pso_mapper.models.enemy import Enemy
from pso_mapper.models.records import EnemyEntry
from pso_mapper.parser.binary_reader import BinaryReader
from pso_mapper.parser.enemy_rules import ENEMY_RULES, MapContext


logger = logging.getLogger(__name__)


def _read_enemy_entry(reader: BinaryReader) -> EnemyEntry:
    return EnemyEntry(
        base=reader.uint32(),
        reserved0=reader.uint16(),
        num_clones=reader.uint16(),
        reserved=reader.uint32_array(11),
        reserved12=reader.float32(),
        reserved13=reader.uint32(),
        reserved14=reader.uint32(),
        skin=reader.uint32(),
        reserved15=reader.uint32(),
    )


def iter_enemy_entries(data: bytes) -> Iterator[EnemyEntry]:
    """Yield every entry in file order.

    Raises:
        MapFormatError: If len(data) is not a multiple of the entry size.
            Checked before anything is yielded.
    """
    if len(data) % ENEMY_ENTRY_SIZE:
        raise MapFormatError(
            f"Map data size {len(data):#x} is not a multiple of "
            f"entry size {ENEMY_ENTRY_SIZE:#x}"
        )
    return _iter_entries(data)


def _iter_entries(data: bytes) -> Iterator[EnemyEntry]:
    reader = BinaryReader(data)
    while reader.remaining > 0:
        yield _read_enemy_entry(reader.slice(ENEMY_ENTRY_SIZE))


def read_enemy_entries(data: bytes) -> list[EnemyEntry]:
    return list(iter_enemy_entries(data))


def parse_map(
    episode: int,
    difficulty: int,
    battle_params: BattleParamsTable,
    data: bytes,
    alt_enemies: bool = False,
    *,
    ids: EnemyIdAllocator | None = None,
) -> list[Enemy]:
    """Decode a map file into enemies.

    Args:
        episode: Game episode number (1 = I, 2 = II, 3 = IV).
        difficulty: 0 (Normal) through 3 (Ultimate).
        battle_params: Table from BattleParamsIndex.get_subtable().
        data: Raw map file contents.
        alt_enemies: Use the alternate monster set (some quest modes).
        ids: Id source; defaults to the process-wide allocator.

    Unknown base codes never abort parsing: they produce one enemy with
    EXPERIENCE_UNKNOWN and rt_index 0, and a warning is logged.

    Raises:
        MapFormatError: If the data is not a whole number of entries.
    """
    if ids is None:
        ids = default_id_allocator()
    ctx = MapContext(episode=episode, difficulty=difficulty, alt_enemies=alt_enemies)
    enemies: list[Enemy] = []

    def add(source_type: int, stat_index: int, rt_index: int) -> None:
        enemies.append(Enemy(
            id=ids.allocate(),
            source_type=source_type,
            experience=battle_params[stat_index].experience,
            rt_index=rt_index,
        ))

    def add_clones(source_type: int, count: int) -> None:
        for _ in range(count):
            enemies.append(Enemy(id=ids.allocate(), source_type=source_type))

    for index, entry in enumerate(iter_enemy_entries(data)):
        rule = ENEMY_RULES.get(entry.base)
        if rule is None:
            enemies.append(Enemy(
                id=ids.allocate(),
                source_type=entry.base,
                experience=EXPERIENCE_UNKNOWN,
                rt_index=RT_INDEX_UNKNOWN,
            ))
            logger.warning(
                "(Entry %d, offset %X in file) Unknown enemy type %08X %08X",
                index, index * ENEMY_ENTRY_SIZE, entry.base, entry.skin,
            )
            add_clones(entry.base, entry.num_clones)
            continue

        variant = rule.resolve(entry, ctx)
        if variant is None:
            add_clones(entry.base, entry.num_clones)
            continue

        spawn = variant.primary(entry, ctx)
        if spawn is not None:
            add(entry.base, spawn.stat_index, spawn.rt_index)
        for escort in variant.escorts:
            for _ in range(escort.count):
                add(entry.base, escort.stat_index, escort.rt_index)
        if variant.companion is not None:
            for _ in range(variant.companion_count(entry)):
                add(entry.base, variant.companion.stat_index, variant.companion.rt_index)
        add_clones(entry.base, variant.clone_count(entry))

    return enemies
