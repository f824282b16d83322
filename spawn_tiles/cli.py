"""
Print the spawnable tiles of every configured area as JSON.

Usage:
    python main.py --map maps/Farm.json --config content.json [--save save.json]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional, Sequence

from .core.errors import SpawnTilesError
from .core.generation import TileListBuilder
from .core.io import load_maps, load_save_data, load_spawn_config
from .core.lookup import MapTileLookup
from .core.types import SaveData

log = logging.getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="List spawnable tiles for each spawn area")
    parser.add_argument("--map", dest="maps", action="append", required=True, help="Map JSON path (repeatable).")
    parser.add_argument("--config", required=True, help="Spawn config JSON path.")
    parser.add_argument("--save", help="Save data JSON with recorded object locations.")
    parser.add_argument("--area", dest="areas", action="append", help="Only build these area ids (repeatable).")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    maps = load_maps(args.maps)
    config = load_spawn_config(args.config)
    save = load_save_data(args.save) if args.save else SaveData()
    builder = TileListBuilder(MapTileLookup(maps))

    wanted = set(args.areas or [])
    result: Dict[str, List[List[int]]] = {}
    failures = 0
    for kind, group in config.groups.items():
        indices = config.indices_for(kind)
        for area in group.areas:
            if wanted and area.unique_area_id not in wanted:
                continue
            try:
                tiles = builder.build(area, save, indices)
            except SpawnTilesError as exc:
                # one broken area must not stop the others
                log.error("Skipping area %s: %s", area.unique_area_id, exc)
                failures += 1
                continue
            result[area.unique_area_id] = [[x, y] for x, y in sorted(tiles)]

    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 1 if failures else 0
