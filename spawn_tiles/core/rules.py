from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Tuple, Union

from .types import SpawnArea

IndexKind = Literal["quarry", "custom"]

ALL_TILES = "All"


@dataclass(frozen=True)
class IndexRule:
    kind: IndexKind


@dataclass(frozen=True)
class PropertyRule:
    name: str


@dataclass(frozen=True)
class RangeRule:
    text: str


TerrainRule = Union[IndexRule, PropertyRule]
TileRule = Union[IndexRule, PropertyRule, RangeRule]


@dataclass(frozen=True)
class AreaRules:
    include: Tuple[TileRule, ...]
    exclude: Tuple[TileRule, ...]


def parse_terrain_rule(token: str) -> TerrainRule:
    """
    Classify one terrain-type token.
    "quarry" and "custom" (any case) select a tile index list,
    everything else is a property name ("All" included).
    """
    lowered = token.lower()
    if lowered == "quarry":
        return IndexRule("quarry")
    if lowered == "custom":
        return IndexRule("custom")
    return PropertyRule(token)


def compile_area_rules(area: SpawnArea) -> AreaRules:
    """
    Turn an area's raw string lists into ordered include/exclude rules.

    Terrain rules come before coordinate rules on each side. Saved object
    locations are not part of the compiled rules; they depend on save data
    and are merged by the builder between the two sides.
    """
    include = tuple(parse_terrain_rule(t) for t in area.include_terrain_types) + tuple(
        RangeRule(s) for s in area.include_areas
    )
    exclude = tuple(parse_terrain_rule(t) for t in area.exclude_terrain_types) + tuple(
        RangeRule(s) for s in area.exclude_areas
    )
    return AreaRules(include=include, exclude=exclude)
