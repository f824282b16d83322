from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Type

from .config import TileListParams
from .errors import ConfigError
from .tiles import GameMap, Properties, TileLayer
from .types import LargeObjectSpawnArea, SaveData, SpawnArea, TileIndexList

log = logging.getLogger(__name__)

SECTION_KINDS: Dict[str, str] = {
    "Forage_Spawn_Settings": "forage",
    "Large_Object_Spawn_Settings": "large_object",
    "Ore_Spawn_Settings": "ore",
}


@dataclass
class SpawnGroup:
    kind: str
    areas: List[SpawnArea] = field(default_factory=list)
    custom_tile_index: List[int] = field(default_factory=list)


@dataclass
class SpawnConfig:
    quarry_tile_index: List[int]
    groups: Dict[str, SpawnGroup] = field(default_factory=dict)

    def indices_for(self, kind: str) -> TileIndexList:
        group = self.groups.get(kind)
        custom = list(group.custom_tile_index) if group else []
        return TileIndexList(quarry=list(self.quarry_tile_index), custom=custom)


def _read_json(path: Path | str, what: str) -> Any:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"{what} '{path.name}' not found at {path}.")

    with open(path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"{what} {path} is not valid JSON: {exc}") from exc


def _int_list(value: Any, where: str) -> List[int]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"{where} must be a list of integers.")
    try:
        return [int(v) for v in value]
    except (TypeError, ValueError):
        raise ConfigError(f"{where} must be a list of integers.") from None


def _str_tuple(value: Any, where: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{where} must be a list of strings.")
    return tuple(value)


# ----------------------------- maps -----------------------------

def _properties(value: Any, where: str) -> Properties:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{where} must be an object of property names to values.")
    return {str(k): str(v) for k, v in value.items()}


def parse_map(data: Dict[str, Any]) -> GameMap:
    if not isinstance(data, dict):
        raise ConfigError("Map JSON must be an object.")

    name = data.get("name")
    if not name:
        raise ConfigError("Map JSON must contain a 'name'.")

    try:
        width = int(data["width"])
        height = int(data["height"])
    except (KeyError, TypeError, ValueError):
        raise ConfigError(f"Map '{name}' needs integer 'width' and 'height'.") from None
    if width <= 0 or height <= 0:
        raise ConfigError(f"Invalid size for map '{name}': {width}x{height}")

    raw_layers = data.get("layers", {})
    if not isinstance(raw_layers, dict):
        raise ConfigError(f"'layers' must be an object of layer names for map '{name}'.")

    layers: Dict[str, TileLayer] = {}
    for layer_name, rows in raw_layers.items():
        if not isinstance(rows, list) or len(rows) != height:
            raise ConfigError(f"Layer '{layer_name}' height mismatch for map '{name}'.")
        grid: TileLayer = []
        for row in rows:
            if not isinstance(row, list) or len(row) != width:
                raise ConfigError(f"Layer '{layer_name}' width mismatch for map '{name}'.")
            try:
                grid.append([int(v) for v in row])
            except (TypeError, ValueError):
                raise ConfigError(f"Layer '{layer_name}' of map '{name}' has a non-integer tile index.") from None
        layers[str(layer_name)] = grid

    raw_index_props = data.get("index_properties", {})
    if not isinstance(raw_index_props, dict):
        raise ConfigError(f"'index_properties' must be an object for map '{name}'.")

    index_properties: Dict[int, Properties] = {}
    for key, props in raw_index_props.items():
        try:
            index = int(key)
        except (TypeError, ValueError):
            raise ConfigError(f"Tile index {key!r} in map '{name}' is not an integer.") from None
        index_properties[index] = _properties(props, f"index_properties['{key}'] of map '{name}'")

    raw_tile_props = data.get("tile_properties", [])
    if not isinstance(raw_tile_props, list):
        raise ConfigError(f"'tile_properties' must be a list for map '{name}'.")

    tile_properties: Dict[tuple[int, int, str], Properties] = {}
    for i, item in enumerate(raw_tile_props):
        where = f"tile_properties #{i} of map '{name}'"
        if not isinstance(item, dict):
            raise ConfigError(f"{where} must be an object.")
        try:
            key = (int(item["x"]), int(item["y"]), str(item.get("layer", "Back")))
        except (KeyError, TypeError, ValueError):
            raise ConfigError(f"{where} needs integer 'x' and 'y'.") from None
        tile_properties[key] = _properties(item.get("properties"), where)

    return GameMap(
        name=str(name),
        width=width,
        height=height,
        layers=layers,
        index_properties=index_properties,
        tile_properties=tile_properties,
    )


def load_map(path: Path | str) -> GameMap:
    """Load a map exported as JSON (tile index layers plus tile properties)."""
    return parse_map(_read_json(path, "Map"))


def load_maps(paths: Iterable[Path | str]) -> Dict[str, GameMap]:
    """Load several maps keyed by name. Names are unique ignoring case; the last one wins."""
    maps: Dict[str, GameMap] = {}
    by_lower: Dict[str, str] = {}
    for path in paths:
        game_map = load_map(path)
        previous = by_lower.get(game_map.name.lower())
        if previous is not None:
            log.warning("Map '%s' loaded twice (as '%s'); keeping %s", game_map.name, previous, path)
            del maps[previous]
        maps[game_map.name] = game_map
        by_lower[game_map.name.lower()] = game_map.name
    return maps


# ----------------------------- spawn config -----------------------------

def _parse_area(item: Dict[str, Any], kind: str, position: int) -> SpawnArea:
    if not isinstance(item, dict):
        raise ConfigError(f"{kind} area #{position} must be an object.")

    map_name = item.get("MapName")
    if not map_name:
        raise ConfigError(f"{kind} area #{position} has no MapName.")
    area_id = str(item.get("UniqueAreaID") or f"{map_name} {kind} {position}")
    where = f"area '{area_id}'"

    cls: Type[SpawnArea] = LargeObjectSpawnArea if kind == "large_object" else SpawnArea
    fields: Dict[str, Any] = dict(
        map_name=str(map_name),
        unique_area_id=area_id,
        include_terrain_types=_str_tuple(item.get("IncludeTerrainTypes"), f"{where} IncludeTerrainTypes"),
        exclude_terrain_types=_str_tuple(item.get("ExcludeTerrainTypes"), f"{where} ExcludeTerrainTypes"),
        include_areas=_str_tuple(item.get("IncludeAreas"), f"{where} IncludeAreas"),
        exclude_areas=_str_tuple(item.get("ExcludeAreas"), f"{where} ExcludeAreas"),
    )
    if cls is LargeObjectSpawnArea:
        fields["find_existing_object_locations"] = bool(item.get("FindExistingObjectLocations", False))
    return cls(**fields)


def parse_spawn_config(data: Dict[str, Any], params: TileListParams | None = None) -> SpawnConfig:
    if not isinstance(data, dict):
        raise ConfigError("Spawn config must be a JSON object.")

    params = params or TileListParams()
    quarry = data.get("QuarryTileIndex")
    config = SpawnConfig(
        quarry_tile_index=_int_list(quarry, "QuarryTileIndex") if quarry is not None
        else list(params.quarry_tile_indices),
    )

    seen: set[str] = set()
    for section, kind in SECTION_KINDS.items():
        settings = data.get(section)
        if settings is None:
            continue
        if not isinstance(settings, dict):
            raise ConfigError(f"{section} must be an object.")

        group = SpawnGroup(
            kind=kind,
            custom_tile_index=_int_list(settings.get("CustomTileIndex"), f"{section}.CustomTileIndex"),
        )
        for i, item in enumerate(settings.get("Areas") or []):
            area = _parse_area(item, kind, i)
            if area.unique_area_id in seen:
                raise ConfigError(f"Duplicate UniqueAreaID: {area.unique_area_id}")
            seen.add(area.unique_area_id)
            group.areas.append(area)
        config.groups[kind] = group

    return config


def load_spawn_config(path: Path | str, params: TileListParams | None = None) -> SpawnConfig:
    return parse_spawn_config(_read_json(path, "Spawn config"), params)


# ----------------------------- save data -----------------------------

def load_save_data(path: Path | str) -> SaveData:
    """
    Load recorded object locations.
    A missing file means nothing was recorded yet and yields empty SaveData.
    """
    path = Path(path)
    if not path.exists():
        log.info("No save data at %s; starting empty", path)
        return SaveData()

    data = _read_json(path, "Save data")
    raw = data.get("ExistingObjectLocations") if isinstance(data, dict) else None
    if raw is None:
        return SaveData()
    if not isinstance(raw, dict):
        raise ConfigError("ExistingObjectLocations must map area ids to lists of strings.")

    locations: Dict[str, List[str]] = {}
    for area_id, entries in raw.items():
        locations[str(area_id)] = list(_str_tuple(entries, f"ExistingObjectLocations['{area_id}']"))
    return SaveData(existing_object_locations=locations)


def save_save_data(save: SaveData, path: Path | str) -> Path:
    path = Path(path)
    if path.suffix != ".json":
        path = path.with_suffix(".json")
    path.parent.mkdir(parents=True, exist_ok=True)

    payload: Dict[str, Any] = {"ExistingObjectLocations": save.existing_object_locations}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=4)

    return path
