from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .types import Coord

TileIndex = int
TileLayer = List[List[TileIndex]]
Properties = Dict[str, str]

NO_TILE: TileIndex = -1

BACK_LAYER = "Back"
TYPE_PROPERTY = "Type"
FLAG_TRUE = "T"


@dataclass
class GameMap:
    name: str
    width: int
    height: int
    layers: Dict[str, TileLayer] = field(default_factory=dict)
    index_properties: Dict[TileIndex, Properties] = field(default_factory=dict)
    # (x, y, layer) -> properties set on that single tile
    tile_properties: Dict[Tuple[int, int, str], Properties] = field(default_factory=dict)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def all_tiles(self) -> Iterator[Coord]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def tile_index_at(self, x: int, y: int, layer: str = BACK_LAYER) -> TileIndex:
        grid = self.layers.get(layer)
        if grid is None or not self.in_bounds(x, y):
            return NO_TILE
        if y >= len(grid) or x >= len(grid[y]):
            return NO_TILE
        return grid[y][x]

    def tile_property(self, x: int, y: int, name: str, layer: str = BACK_LAYER) -> Optional[str]:
        index = self.tile_index_at(x, y, layer)
        if index == NO_TILE:
            return None

        # tile-specific properties take priority over the tilesheet's
        own = self.tile_properties.get((x, y, layer))
        if own is not None and name in own:
            return own[name]

        return self.index_properties.get(index, {}).get(name)
