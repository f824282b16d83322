from __future__ import annotations
from .core.config import TileListParams
from .core.generation import TileListBuilder, build_tile_list
from .core.lookup import MapTileLookup
from .core.tiles import GameMap
from .core.types import Coord, LargeObjectSpawnArea, SaveData, SpawnArea, TileIndexList

__all__ = [
    "TileListParams",
    "TileListBuilder",
    "build_tile_list",
    "MapTileLookup",
    "GameMap",
    "Coord",
    "LargeObjectSpawnArea",
    "SaveData",
    "SpawnArea",
    "TileIndexList",
]
