from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set, Tuple

Coord = Tuple[int, int]
CoordSet = Set[Coord]


@dataclass(frozen=True)
class SpawnArea:
    map_name: str
    unique_area_id: str
    include_terrain_types: Tuple[str, ...] = ()
    exclude_terrain_types: Tuple[str, ...] = ()
    include_areas: Tuple[str, ...] = ()
    exclude_areas: Tuple[str, ...] = ()


@dataclass(frozen=True)
class LargeObjectSpawnArea(SpawnArea):
    find_existing_object_locations: bool = False


@dataclass
class TileIndexList:
    quarry: List[int] = field(default_factory=list)
    custom: List[int] = field(default_factory=list)


@dataclass
class SaveData:
    existing_object_locations: Dict[str, List[str]] = field(default_factory=dict)

    def locations_for(self, area_id: str) -> List[str] | None:
        return self.existing_object_locations.get(area_id)

    def record_locations(self, area_id: str, coords: Iterable[Coord]) -> List[str]:
        """
        Store coordinates as "x,y" range strings for an area.
        Replaces anything previously recorded for that id.
        """
        entries = [f"{x},{y}" for x, y in sorted(set(coords))]
        self.existing_object_locations[area_id] = entries
        return entries
