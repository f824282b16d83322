import pytest

from spawn_tiles.core.config import TileListParams
from spawn_tiles.core.errors import ConfigError, RangeStringError, UnknownMapError
from spawn_tiles.core.lookup import MapTileLookup, parse_range_string
from spawn_tiles.core.tiles import NO_TILE
from spawn_tiles.core.types import SpawnArea

AREA = SpawnArea(map_name="Farm", unique_area_id="a")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("5,5", ((5, 5), (5, 5))),
        ("1,2/3,4", ((1, 2), (3, 4))),
        ("3,4/1,2", ((1, 2), (3, 4))),
        ("3,1/1,4", ((1, 1), (3, 4))),
        (" 1 , 2 / 3 , 4 ", ((1, 2), (3, 4))),
        ("-2,-2/1,1", ((-2, -2), (1, 1))),
    ],
)
def test_parse_range_string(text, expected):
    assert parse_range_string(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "5", "1,2,3", "1,2/3", "a,b", "1,2/3,4/5,6", "1.5,2"])
def test_parse_range_string_rejects_garbage(text):
    with pytest.raises(RangeStringError):
        parse_range_string(text)


def test_range_error_is_a_value_error():
    with pytest.raises(ValueError, match="Malformed coordinate range"):
        parse_range_string("x")


def test_range_is_clipped_to_map(lookup):
    assert lookup.tiles_by_range_string(AREA, "2,1/10,10") == {(2, 1), (3, 1), (2, 2), (3, 2)}
    assert lookup.tiles_by_range_string(AREA, "-5,-5/0,0") == {(0, 0)}
    assert lookup.tiles_by_range_string(AREA, "20,20") == set()


def test_tiles_by_index(lookup):
    assert lookup.tiles_by_index(AREA, [2]) == {(1, 1), (2, 1), (1, 2)}
    assert lookup.tiles_by_index(AREA, []) == set()
    assert lookup.tiles_by_index(AREA, [999]) == set()


def test_all_is_case_insensitive(lookup, farm_map):
    assert lookup.tiles_by_property(AREA, "aLL") == set(farm_map.all_tiles())


def test_type_property_matching(lookup):
    assert lookup.tiles_by_property(AREA, "grass") == {(2, 0), (0, 1), (3, 2)}
    assert lookup.tiles_by_property(AREA, "Wood") == {(1, 0)}
    assert lookup.tiles_by_property(AREA, "Stone") == {(0, 0), (2, 2)}


def test_unknown_property_matches_nothing(lookup):
    assert lookup.tiles_by_property(AREA, "Lava") == set()


def test_flag_property(lookup):
    assert lookup.tiles_by_property(AREA, "DIGGABLE") == {(1, 1), (2, 1), (1, 2)}


def test_custom_flag_properties(farm_map):
    farm_map.index_properties[1]["Water"] = "T"
    lookup = MapTileLookup({"Farm": farm_map}, TileListParams(flag_properties=("Diggable", "Water")))
    assert lookup.tiles_by_property(AREA, "water") == {(1, 0), (2, 0), (0, 1), (3, 2)}


def test_tile_property_precedence(farm_map):
    assert farm_map.tile_property(1, 0, "Type") == "Wood"
    assert farm_map.tile_property(2, 0, "Type") == "Grass"
    assert farm_map.tile_property(0, 2, "Type") is None
    assert farm_map.tile_index_at(0, 2) == NO_TILE
    assert farm_map.tile_index_at(9, 9) == NO_TILE
    assert farm_map.tile_index_at(0, 0, "Buildings") == NO_TILE


def test_map_names_match_case_insensitively(lookup):
    area = SpawnArea(map_name="farm", unique_area_id="a")
    assert lookup.tiles_by_index(area, [556]) == {(0, 0)}


def test_unknown_map(lookup):
    area = SpawnArea(map_name="Mountain", unique_area_id="m")
    with pytest.raises(UnknownMapError, match="Mountain"):
        lookup.tiles_by_property(area, "All")
    with pytest.raises(KeyError):
        lookup.tiles_by_range_string(area, "1,1")


def test_map_names_differing_only_in_case_are_rejected(farm_map):
    with pytest.raises(ConfigError, match="differ only in case"):
        MapTileLookup({"Farm": farm_map, "farm": farm_map})
