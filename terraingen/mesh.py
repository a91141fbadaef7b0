"""Triangle mesh built from a tile map's height field."""

from __future__ import annotations

import logging

import numpy as np

from terraingen.camera import FBMParams
from terraingen.geometry import Vertex, compute_normals, compute_triangle_indices
from terraingen.tilemap import TileMap

logger = logging.getLogger(__name__)


class TerrainMesh:
    """Vertices, triangle indices and smooth normals for a tile map."""

    def __init__(self, tile_map: TileMap, height_scale: float = 20.0) -> None:
        self.tile_map = tile_map
        self.height_scale = float(height_scale)
        self.vertices: list[Vertex] = []
        self.indices = np.empty(0, dtype=np.uint32)
        self.compute()

    def compute(self) -> None:
        """Rebuild the mesh from the current tile heights."""
        width, height = self.tile_map.width, self.tile_map.height
        logger.info("Updating tile map mesh: %dx%d", width, height)
        heights = np.array(
            [[tile.height for tile in row] for row in self.tile_map.tiles], dtype=np.float64
        ).reshape(height, width)
        xs, zs = np.meshgrid(np.arange(width, dtype=np.float64), np.arange(height, dtype=np.float64))
        positions = np.stack([xs, heights * self.height_scale, zs], axis=-1).reshape(-1, 3)
        self.vertices = [Vertex((x, y, z)) for x, y, z in positions.tolist()]
        self.indices = compute_triangle_indices(height, width)
        compute_normals(self.vertices, self.indices)
        if not self.vertices:
            logger.error("No vertices generated; the tile map is empty")
        elif not self.indices.size:
            logger.error("No indices generated; the tile map is too small")
        else:
            logger.info(
                "Generated %d vertices, %d triangles", len(self.vertices), self.indices.size // 3
            )

    def update(self, fbm: FBMParams) -> None:
        """Regenerate the tile map's heights with new noise parameters and rebuild."""
        self.tile_map.generate_height_map(fbm.frequency, fbm.octaves, fbm.persistence)
        self.compute()