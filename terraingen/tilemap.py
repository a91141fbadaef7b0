"""A grid of terrain tiles with height generation, zoning and image export."""

from __future__ import annotations

import os
from typing import Iterable

import numpy as np
from PIL import Image

from terraingen.noise import PerlinNoise, fbm_noise
from terraingen.tile import Tile, Zone, ZoneType

_ZONE_COLORS = {
    ZoneType.SPAWN: (255, 255, 0),
    ZoneType.ARENA: (0, 200, 0),
    ZoneType.CHOKE: (200, 0, 0),
    ZoneType.FLANK: (0, 0, 255),
    ZoneType.HIGH_GROUND: (128, 0, 128),
    ZoneType.OBJECTIVE: (255, 140, 0),
}
_DEFAULT_COLOR = (100, 100, 100)


def zone_to_color(zone_type: ZoneType) -> tuple[int, int, int]:
    """RGB colour used to draw a zone type."""
    return _ZONE_COLORS.get(zone_type, _DEFAULT_COLOR)


_COLOR_TABLE = np.array([zone_to_color(z) for z in ZoneType], dtype=np.uint8)


class TileMap:
    """A width x height grid of tiles, indexed as (x, y)."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("map dimensions must not be negative")
        self.width = int(width)
        self.height = int(height)
        self.tiles = [[Tile() for _ in range(self.width)] for _ in range(self.height)]

    def get(self, x: int, y: int) -> Tile:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) outside {self.width}x{self.height} map")
        return self.tiles[y][x]

    def _grid(self) -> tuple[np.ndarray, np.ndarray]:
        xs, ys = np.meshgrid(
            np.arange(self.width, dtype=np.float64), np.arange(self.height, dtype=np.float64)
        )
        return xs, ys

    def _set_heights(self, values: np.ndarray) -> None:
        for row, row_values in zip(self.tiles, np.asarray(values).tolist()):
            for tile, value in zip(row, row_values):
                tile.height = float(value)

    def _heights(self) -> np.ndarray:
        return np.array(
            [[tile.height for tile in row] for row in self.tiles], dtype=np.float64
        ).reshape(self.height, self.width)

    def generate_height_map(
        self, frequency: float = 0.02, octaves: int = 4, persistence: float = 0.5
    ) -> None:
        """Fill tile heights with fractal Perlin noise in [-1, 1]."""
        noise = PerlinNoise(frequency=frequency)
        xs, ys = self._grid()
        self._set_heights(fbm_noise(noise, xs, ys, octaves, persistence))

    def generate_raw_height_map(self, frequency: float = 0.02) -> None:
        """Fill tile heights with a single octave of Perlin noise."""
        noise = PerlinNoise(frequency=frequency)
        xs, ys = self._grid()
        self._set_heights(noise.get_noise(xs, ys))

    def compute_global_stats(self) -> tuple[float, float]:
        """Mean and standard deviation of all tile heights."""
        count = self.width * self.height
        if count == 0:
            raise ValueError("cannot compute statistics of an empty map")
        heights = self._heights()
        mean = float(heights.sum() / count)
        variance = float((heights * heights).sum() / count) - mean * mean
        return mean, float(np.sqrt(max(variance, 0.0)))

    def apply_zones(self, zones: Iterable[Zone]) -> None:
        """Mark every in-bounds tile covered by each zone with its type."""
        for zone in zones:
            y_lo = max(zone.y_start, 0)
            y_hi = min(zone.y_start + zone.size, self.height)
            x_lo = max(zone.x_start, 0)
            x_hi = min(zone.x_start + zone.size, self.width)
            for row in self.tiles[y_lo:y_hi]:
                for tile in row[x_lo:x_hi]:
                    tile.zone_type = zone.type

    def zone_image(self) -> np.ndarray:
        """RGB image (height, width, 3) of zone colours."""
        codes = np.array(
            [[int(tile.zone_type) for tile in row] for row in self.tiles], dtype=np.intp
        ).reshape(self.height, self.width)
        return _COLOR_TABLE[codes]

    def _gray(self) -> np.ndarray:
        scaled = (self._heights().astype(np.float32) + np.float32(1.0)) * np.float32(127.5)
        return np.clip(scaled, 0.0, 255.0).astype(np.uint8)

    def terrain_image(self) -> np.ndarray:
        """Grayscale image (height, width) mapping heights [-1, 1] to [0, 255]."""
        return self._gray()

    def overlay_image(self) -> np.ndarray:
        """RGB image blending 70% terrain gray with 30% zone colour."""
        gray = self._gray().astype(np.float32)[..., np.newaxis]
        colors = self.zone_image().astype(np.float32)
        blended = np.float32(0.7) * gray + np.float32(0.3) * colors
        return np.clip(blended, 0.0, 255.0).astype(np.uint8)

    @staticmethod
    def _save(image: np.ndarray, path: str | os.PathLike) -> None:
        Image.fromarray(image).save(path, format="PNG")

    def export_zone_map(self, path: str | os.PathLike) -> None:
        self._save(self.zone_image(), path)

    def export_terrain_map(self, path: str | os.PathLike) -> None:
        self._save(self.terrain_image(), path)

    def export_overlay_map(self, path: str | os.PathLike) -> None:
        self._save(self.overlay_image(), path)