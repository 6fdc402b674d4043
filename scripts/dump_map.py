"""Dump the enemies decoded from a map file.

Usage:
    python -m scripts.dump_map MAP_FILE [--episode {1,2,4}] [--difficulty N]
                               [--battle-params PREFIX] [--solo]
                               [--alt-enemies] [--format {text,json}]

Battle params are loaded from --battle-params, or from
PSO_MAPPER_BATTLE_PARAMS_PREFIX, or from the default server layout.
"""

import argparse
import json
import logging
from collections import Counter
from pathlib import Path

from pso_mapper.config import MapperConfig
from pso_mapper.errors import PsoMapperError
from pso_mapper.models.battle_params import BattleParamsIndex
from pso_mapper.models.constants import Difficulty, Episode
from pso_mapper.models.enemy import Enemy
from pso_mapper.parser.enemy_rules import ENEMY_RULES
from pso_mapper.parser.map_parser import parse_map


_EPISODE_ARGS: dict[str, Episode] = {
    "1": Episode.EP1,
    "2": Episode.EP2,
    "4": Episode.EP4,
}


def family_name(base: int) -> str:
    rule = ENEMY_RULES.get(base)
    return rule.name if rule is not None else f"Unknown {base:#x}"


def _enemy_to_dict(enemy: Enemy) -> dict:
    return {
        "id": enemy.id,
        "source_type": enemy.source_type,
        "family": family_name(enemy.source_type),
        "experience": enemy.experience,
        "rt_index": enemy.rt_index,
        "is_clone": enemy.is_clone,
    }


def summarize(enemies: list[Enemy]) -> list[tuple[str, int]]:
    """Count enemies per family, in order of first appearance."""
    counts = Counter(family_name(e.source_type) for e in enemies)
    return list(counts.items())


def main(argv: list[str] | None = None) -> int:
    config = MapperConfig.from_env()
    parser = argparse.ArgumentParser(description="Dump enemies from a map file")
    parser.add_argument("map_file", type=Path, help="Map file (raw enemy entries)")
    parser.add_argument("--episode", choices=sorted(_EPISODE_ARGS), default="1",
                        help="Episode the map belongs to (default: 1)")
    parser.add_argument("--difficulty", type=int, choices=[int(d) for d in Difficulty], default=0,
                        help="0 = Normal .. 3 = Ultimate (default: 0)")
    parser.add_argument("--battle-params", type=Path, default=config.battle_params_prefix,
                        help="BattleParamEntry path prefix")
    parser.add_argument("--solo", action="store_true", default=config.solo,
                        help="Use solo-mode battle params")
    parser.add_argument("--alt-enemies", action="store_true", default=config.alt_enemies,
                        help="Use the alternate enemy set")
    parser.add_argument("--summary", action="store_true",
                        help="Print per-family counts instead of every enemy")
    parser.add_argument("--format", choices=("text", "json"), default="text",
                        help="Output format (default: text)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger = logging.getLogger("dump_map")

    episode = _EPISODE_ARGS[args.episode]
    difficulty = Difficulty(args.difficulty)
    try:
        index = BattleParamsIndex.from_prefix(args.battle_params)
        table = index.get_subtable(args.solo, episode.table_index, difficulty)
        enemies = parse_map(
            episode, difficulty, table, args.map_file.read_bytes(), args.alt_enemies
        )
    except (OSError, PsoMapperError) as exc:
        logger.error("%s", exc)
        return 1

    if args.format == "json":
        output: dict[str, object] = {
            "map_file": str(args.map_file),
            "episode": int(episode),
            "difficulty": int(difficulty),
            "difficulty_name": difficulty.name,
            "solo": args.solo,
            "alt_enemies": args.alt_enemies,
            "total": len(enemies),
        }
        if args.summary:
            output["families"] = dict(summarize(enemies))
        else:
            output["enemies"] = [_enemy_to_dict(e) for e in enemies]
        print(json.dumps(output, indent=2))
        return 0

    if args.summary:
        for name, count in summarize(enemies):
            print(f"{count:5d}  {name}")
    else:
        for enemy in enemies:
            print(f"{enemy}  {family_name(enemy.source_type)}")
    print(f"Total: {len(enemies)} enemies")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
