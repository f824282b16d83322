from __future__ import annotations
from typing import Dict, Iterable, Mapping, Optional, Protocol, Tuple

from .config import TileListParams
from .errors import ConfigError, RangeStringError, UnknownMapError
from .rules import ALL_TILES
from .tiles import FLAG_TRUE, GameMap
from .types import Coord, CoordSet, SpawnArea


class TileLookup(Protocol):
    def tiles_by_index(self, area: SpawnArea, indices: Iterable[int]) -> CoordSet: ...

    def tiles_by_property(self, area: SpawnArea, name: str) -> CoordSet: ...

    def tiles_by_range_string(self, area: SpawnArea, text: str) -> CoordSet: ...


def _parse_point(text: str, part: str) -> Coord:
    pieces = part.split(",")
    if len(pieces) != 2:
        raise RangeStringError(text)
    try:
        return int(pieces[0].strip()), int(pieces[1].strip())
    except ValueError:
        raise RangeStringError(text, f"non-integer coordinate in {part.strip()!r}") from None


def parse_range_string(text: str) -> Tuple[Coord, Coord]:
    """
    Parse "x,y" or "x1,y1/x2,y2" into the (min, max) corners of an
    inclusive rectangle. Corners may be given in any order.
    """
    if not isinstance(text, str) or not text.strip():
        raise RangeStringError(str(text), "empty coordinate range")

    parts = text.split("/")
    if len(parts) == 1:
        start = end = _parse_point(text, parts[0])
    elif len(parts) == 2:
        start = _parse_point(text, parts[0])
        end = _parse_point(text, parts[1])
    else:
        raise RangeStringError(text)

    x0, x1 = sorted((start[0], end[0]))
    y0, y1 = sorted((start[1], end[1]))
    return (x0, y0), (x1, y1)


class MapTileLookup:
    """Resolves terrain, index and coordinate rules against loaded maps."""

    def __init__(self, maps: Mapping[str, GameMap], params: Optional[TileListParams] = None):
        self.params = params or TileListParams()
        self._maps: Dict[str, GameMap] = {}
        for name, game_map in maps.items():
            key = name.lower()
            if key in self._maps:
                raise ConfigError(f"Map names '{name}' and '{self._maps[key].name}' differ only in case.")
            self._maps[key] = game_map
        self._flags = {f.lower(): f for f in self.params.flag_properties}

    def map_for(self, area: SpawnArea) -> GameMap:
        game_map = self._maps.get(area.map_name.lower())
        if game_map is None:
            raise UnknownMapError(
                f"Map '{area.map_name}' for area '{area.unique_area_id}' is not loaded."
            )
        return game_map

    def tiles_by_index(self, area: SpawnArea, indices: Iterable[int]) -> CoordSet:
        wanted = set(indices)
        if not wanted:
            return set()

        game_map = self.map_for(area)
        layer = self.params.layer
        return {
            (x, y) for x, y in game_map.all_tiles()
            if game_map.tile_index_at(x, y, layer) in wanted
        }

    def tiles_by_property(self, area: SpawnArea, name: str) -> CoordSet:
        game_map = self.map_for(area)
        if name.lower() == ALL_TILES.lower():
            return set(game_map.all_tiles())

        layer = self.params.layer
        flag = self._flags.get(name.lower())
        if flag is not None:
            return {
                (x, y) for x, y in game_map.all_tiles()
                if game_map.tile_property(x, y, flag, layer) == FLAG_TRUE
            }

        wanted = name.lower()
        out: CoordSet = set()
        for x, y in game_map.all_tiles():
            value = game_map.tile_property(x, y, self.params.type_property, layer)
            if value is not None and value.lower() == wanted:
                out.add((x, y))
        return out

    def tiles_by_range_string(self, area: SpawnArea, text: str) -> CoordSet:
        (x0, y0), (x1, y1) = parse_range_string(text)
        game_map = self.map_for(area)

        # clip to the map
        x0, y0 = max(x0, 0), max(y0, 0)
        x1, y1 = min(x1, game_map.width - 1), min(y1, game_map.height - 1)
        return {(x, y) for y in range(y0, y1 + 1) for x in range(x0, x1 + 1)}
