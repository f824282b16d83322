from __future__ import annotations

from .config import TileListParams
from .errors import ConfigError, RangeStringError, SpawnTilesError, UnknownMapError
from .generation import TileListBuilder, build_tile_list
from .lookup import MapTileLookup, TileLookup, parse_range_string
from .rules import AreaRules, IndexRule, PropertyRule, RangeRule, compile_area_rules, parse_terrain_rule
from .tiles import GameMap
from .types import Coord, CoordSet, LargeObjectSpawnArea, SaveData, SpawnArea, TileIndexList
from . import io as io

__all__ = [
    "TileListParams",
    "ConfigError",
    "RangeStringError",
    "SpawnTilesError",
    "UnknownMapError",
    "TileListBuilder",
    "build_tile_list",
    "MapTileLookup",
    "TileLookup",
    "parse_range_string",
    "AreaRules",
    "IndexRule",
    "PropertyRule",
    "RangeRule",
    "compile_area_rules",
    "parse_terrain_rule",
    "GameMap",
    "Coord",
    "CoordSet",
    "LargeObjectSpawnArea",
    "SaveData",
    "SpawnArea",
    "TileIndexList",
    "io",
]
