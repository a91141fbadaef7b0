"""Grid triangulation and smooth vertex normals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

Vec3 = tuple[float, float, float]


@dataclass
class Vertex:
    """A point in 3D space with its lighting normal."""

    position: Vec3
    normal: Vec3 = (0.0, 0.0, 0.0)


def compute_triangle_indices(height: int, width: int) -> np.ndarray:
    """Indices of two triangles per grid cell for a row-major height x width vertex grid."""
    if height < 2 or width < 2:
        return np.empty(0, dtype=np.uint32)
    z, x = np.meshgrid(np.arange(height - 1), np.arange(width - 1), indexing="ij")
    top_left = (z * width + x).ravel()
    top_right = top_left + 1
    bottom_left = ((z + 1) * width + x).ravel()
    bottom_right = bottom_left + 1
    triangles = np.stack(
        [top_left, bottom_left, top_right, top_right, bottom_left, bottom_right], axis=1
    )
    return triangles.ravel().astype(np.uint32)


def _normalize_rows(vectors: np.ndarray) -> np.ndarray:
    lengths = np.linalg.norm(vectors, axis=1, keepdims=True)
    safe = np.where(lengths > 0.0, lengths, 1.0)
    return vectors / safe


def compute_normals(vertices: Sequence[Vertex], indices) -> np.ndarray:
    """Set each vertex's normal to the normalised sum of its adjacent face normals.

    Returns the normals as an (N, 3) array as well.
    """
    flat = np.asarray(indices, dtype=np.intp).ravel()
    if flat.size % 3:
        raise ValueError("index count must be a multiple of 3")
    positions = np.array([v.position for v in vertices], dtype=np.float64).reshape(-1, 3)
    if flat.size and (flat.min() < 0 or flat.max() >= len(positions)):
        raise IndexError("triangle index out of range")
    tris = flat.reshape(-1, 3)
    normals = np.zeros_like(positions)
    if tris.size:
        p0 = positions[tris[:, 0]]
        faces = _normalize_rows(np.cross(positions[tris[:, 1]] - p0, positions[tris[:, 2]] - p0))
        for corner in range(3):
            np.add.at(normals, tris[:, corner], faces)
    normals = _normalize_rows(normals)
    for vertex, normal in zip(vertices, normals):
        vertex.normal = (float(normal[0]), float(normal[1]), float(normal[2]))
    return normals