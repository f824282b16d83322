import copy

import pytest

from spawn_tiles.core.io import parse_map
from spawn_tiles.core.lookup import MapTileLookup

# 4x3 map, Back layer:
#   556  1    1    10
#   1    2    2    11
#   -1   2    558  1
# index 1 is Grass, 2 is diggable Dirt, 556/558 are Stone.
# (1, 0) carries its own Type=Wood which beats the tilesheet's Grass.
FARM_MAP = {
    "name": "Farm",
    "width": 4,
    "height": 3,
    "layers": {
        "Back": [
            [556, 1, 1, 10],
            [1, 2, 2, 11],
            [-1, 2, 558, 1],
        ],
    },
    "index_properties": {
        "1": {"Type": "Grass"},
        "2": {"Type": "Dirt", "Diggable": "T"},
        "556": {"Type": "Stone"},
        "558": {"Type": "Stone"},
    },
    "tile_properties": [
        {"x": 1, "y": 0, "layer": "Back", "properties": {"Type": "Wood"}},
    ],
}


@pytest.fixture
def farm_map_data():
    return copy.deepcopy(FARM_MAP)


@pytest.fixture
def farm_map(farm_map_data):
    return parse_map(farm_map_data)


@pytest.fixture
def lookup(farm_map):
    return MapTileLookup({"Farm": farm_map})


class StubLookup:
    """Lookup backed by plain dicts; records every call it receives."""

    def __init__(self, by_property=None, by_index=None, by_range=None):
        self.by_property = by_property or {}
        self.by_index = by_index or {}
        self.by_range = by_range or {}
        self.calls = []

    def tiles_by_index(self, area, indices):
        key = tuple(indices)
        self.calls.append(("index", key))
        return set(self.by_index.get(key, set()))

    def tiles_by_property(self, area, name):
        self.calls.append(("property", name))
        return set(self.by_property.get(name, set()))

    def tiles_by_range_string(self, area, text):
        self.calls.append(("range", text))
        return set(self.by_range.get(text, set()))


@pytest.fixture
def stub_lookup_factory():
    return StubLookup
