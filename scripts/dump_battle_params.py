"""Dump one BattleParamEntry table.

Usage:
    python -m scripts.dump_battle_params [--battle-params PREFIX]
        [--episode-index {0,1,2}] [--difficulty N] [--solo] [--format {text,json}]
"""

import argparse
import json
import logging
from pathlib import Path

from pso_mapper.config import MapperConfig
from pso_mapper.errors import PsoMapperError
from pso_mapper.models.battle_params import BattleParams, BattleParamsIndex
from pso_mapper.models.constants import Difficulty


_STAT_FIELDS = ("atp", "psv", "evp", "hp", "dfp", "ata", "lck", "esp", "experience", "difficulty")


def format_row(monster_type: int, row: BattleParams) -> str:
    stats = " ".join(f"{name}={getattr(row, name)}" for name in _STAT_FIELDS)
    return f"{monster_type:02X}: {stats}"


def main(argv: list[str] | None = None) -> int:
    config = MapperConfig.from_env()
    parser = argparse.ArgumentParser(description="Dump a BattleParamEntry table")
    parser.add_argument("--battle-params", type=Path, default=config.battle_params_prefix,
                        help="BattleParamEntry path prefix")
    parser.add_argument("--episode-index", type=int, choices=range(3), default=0,
                        help="0 = Episode I, 1 = Episode II, 2 = Episode IV")
    parser.add_argument("--difficulty", type=int, choices=[int(d) for d in Difficulty], default=0,
                        help="0 = Normal .. 3 = Ultimate")
    parser.add_argument("--solo", action="store_true", default=config.solo)
    parser.add_argument("--format", choices=("text", "json"), default="text")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.log_level)

    try:
        index = BattleParamsIndex.from_prefix(args.battle_params)
        table = index.get_subtable(args.solo, args.episode_index, Difficulty(args.difficulty))
    except (OSError, PsoMapperError) as exc:
        logging.getLogger("dump_battle_params").error("%s", exc)
        return 1

    if args.format == "json":
        rows = [
            {"monster_type": i, **{name: getattr(row, name) for name in _STAT_FIELDS}}
            for i, row in enumerate(table)
        ]
        print(json.dumps(rows, indent=2))
    else:
        for i, row in enumerate(table):
            print(format_row(i, row))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
