from __future__ import annotations
import logging
from typing import Iterable, List, Optional

from .lookup import TileLookup
from .rules import AreaRules, IndexRule, PropertyRule, RangeRule, TileRule, compile_area_rules
from .types import Coord, CoordSet, LargeObjectSpawnArea, SaveData, SpawnArea, TileIndexList

log = logging.getLogger(__name__)


class TileListBuilder:
    """
    Builds the list of tiles eligible for spawning in one SpawnArea.

    Include rules are unioned first, then saved object locations (large
    object areas only), then exclude rules are subtracted. Exclusions
    therefore always win over inclusions.
    """

    def __init__(self, lookup: TileLookup, logger: Optional[logging.Logger] = None):
        self.lookup = lookup
        self.log = logger or log

    def build(self, area: SpawnArea, save: SaveData, indices: TileIndexList) -> List[Coord]:
        return self.build_compiled(area, compile_area_rules(area), save, indices)

    def build_compiled(
        self,
        area: SpawnArea,
        rules: AreaRules,
        save: SaveData,
        indices: TileIndexList,
    ) -> List[Coord]:
        valid_tiles: CoordSet = set()

        for rule in rules.include:
            valid_tiles |= self._resolve(area, rule, indices)

        valid_tiles |= self._existing_object_tiles(area, save)

        for rule in rules.exclude:
            valid_tiles -= self._resolve(area, rule, indices)

        self.log.debug("Area %s on %s: %d valid tiles", area.unique_area_id, area.map_name, len(valid_tiles))
        return list(valid_tiles)

    def _resolve(self, area: SpawnArea, rule: TileRule, indices: TileIndexList) -> CoordSet:
        if isinstance(rule, IndexRule):
            chosen = indices.quarry if rule.kind == "quarry" else indices.custom
            return self.lookup.tiles_by_index(area, chosen)
        if isinstance(rule, PropertyRule):
            return self.lookup.tiles_by_property(area, rule.name)
        if isinstance(rule, RangeRule):
            return self.lookup.tiles_by_range_string(area, rule.text)
        raise TypeError(f"Unsupported tile rule: {rule!r}")

    def _existing_object_tiles(self, area: SpawnArea, save: SaveData) -> CoordSet:
        if not isinstance(area, LargeObjectSpawnArea) or not area.find_existing_object_locations:
            return set()

        recorded = save.locations_for(area.unique_area_id)
        if recorded is None:
            self.log.info("Issue: This area never saved its object location data: %s", area.unique_area_id)
            self.log.info(
                "FindExistingObjectLocations will not function for this area. "
                "Please report this to the mod's author."
            )
            return set()

        tiles: CoordSet = set()
        for text in recorded:
            tiles |= self.lookup.tiles_by_range_string(area, text)
        return tiles


def build_tile_list(
    area: SpawnArea,
    save: SaveData,
    quarry_indices: Iterable[int],
    custom_indices: Iterable[int],
    lookup: TileLookup,
    logger: Optional[logging.Logger] = None,
) -> List[Coord]:
    indices = TileIndexList(quarry=list(quarry_indices), custom=list(custom_indices))
    return TileListBuilder(lookup, logger).build(area, save, indices)
