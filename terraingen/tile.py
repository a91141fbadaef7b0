"""Tiles, zone types and zones that make up a terrain map."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ZoneType(IntEnum):
    """Gameplay role assigned to a region of the map."""

    UNASSIGNED = 0
    SPAWN = 1
    ARENA = 2
    CHOKE = 3
    FLANK = 4
    HIGH_GROUND = 5
    OBJECTIVE = 6


@dataclass
class Tile:
    """A single cell of the terrain grid."""

    height: float = 0.0
    walkable: bool = True
    has_cover: bool = False
    zone_type: ZoneType = ZoneType.UNASSIGNED


@dataclass(frozen=True)
class Zone:
    """A square block of tiles starting at (x_start, y_start) with one zone type."""

    x_start: int
    y_start: int
    size: int
    type: ZoneType