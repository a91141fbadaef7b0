"""Split a map into square zones and classify each with a strategy."""

from __future__ import annotations

from typing import Callable

import numpy as np

from terraingen.tile import Zone, ZoneType
from terraingen.tilemap import TileMap

ZoneStrategy = Callable[[float, float, int, int], ZoneType]


class ZonePlanner:
    """Plans zones of a fixed size over a map of given dimensions."""

    def __init__(self, map_width: int, map_height: int, zone_size: int) -> None:
        if zone_size <= 0:
            raise ValueError("zone size must be positive")
        if map_width < 0 or map_height < 0:
            raise ValueError("map dimensions must not be negative")
        self.width = int(map_width)
        self.height = int(map_height)
        self.zone_size = int(zone_size)

    def plan_zones(self, tile_map: TileMap, strategy: ZoneStrategy) -> list[Zone]:
        """Classify each zone with strategy(avg_height, stddev, x, y), row by row."""
        if tile_map.width < self.width or tile_map.height < self.height:
            raise ValueError("tile map is smaller than the planned area")
        heights = np.array(
            [[tile.height for tile in row[: self.width]] for row in tile_map.tiles[: self.height]],
            dtype=np.float64,
        ).reshape(self.height, self.width)
        zones = []
        for y in range(0, self.height, self.zone_size):
            for x in range(0, self.width, self.zone_size):
                block = heights[y : y + self.zone_size, x : x + self.zone_size]
                if block.size:
                    avg = float(block.mean())
                    stddev = float(np.sqrt(((block - avg) ** 2).mean()))
                else:
                    avg = stddev = 0.0
                zones.append(Zone(x, y, self.zone_size, strategy(avg, stddev, x, y)))
        return zones

    def plan_rotating_zones(self) -> list[Zone]:
        """Whole zones only, cycling through the assignable zone types."""
        rows = self.height // self.zone_size
        cols = self.width // self.zone_size
        return [
            Zone(col * self.zone_size, row * self.zone_size, self.zone_size,
                 ZoneType((row + col) % 6 + 1))
            for row in range(rows)
            for col in range(cols)
        ]