from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple

from .tiles import BACK_LAYER, TYPE_PROPERTY


def _default_quarry_indices() -> List[int]:
    return [556, 558, 583, 606, 607, 608, 630, 635, 636, 680, 681, 685]


@dataclass
class TileListParams:
    quarry_tile_indices: List[int] = field(default_factory=_default_quarry_indices)
    layer: str = BACK_LAYER
    type_property: str = TYPE_PROPERTY
    # terrain tokens that test a "T" flag instead of the Type property
    flag_properties: Tuple[str, ...] = ("Diggable",)
