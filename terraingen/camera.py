"""Camera, lighting and terrain parameter records with their view transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

Vec3 = tuple[float, float, float]


def _unit(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return v / length


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from eye towards center."""
    eye = np.asarray(eye, dtype=np.float64)
    f = _unit(np.asarray(center, dtype=np.float64) - eye)
    s = _unit(np.cross(f, np.asarray(up, dtype=np.float64)))
    u = np.cross(s, f)
    return np.array(
        [
            [s[0], s[1], s[2], -np.dot(s, eye)],
            [u[0], u[1], u[2], -np.dot(u, eye)],
            [-f[0], -f[1], -f[2], np.dot(f, eye)],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection to clip space with depth in [-1, 1]."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


@dataclass
class Camera:
    """Viewer position, direction and field of view in degrees."""

    position: Vec3 = (0.0, 0.0, 0.0)
    front: Vec3 = (0.0, 0.0, -1.0)
    up: Vec3 = (0.0, 1.0, 0.0)
    fov: float = 45.0

    def view_matrix(self) -> np.ndarray:
        target = np.add(self.position, self.front)
        return look_at(self.position, target, self.up)

    def projection_matrix(self, aspect_ratio: float) -> np.ndarray:
        return perspective(math.radians(self.fov), aspect_ratio, 0.1, 3000.0)


@dataclass
class Material:
    diffuse: Vec3 = (0.9, 0.85, 0.9)
    specular: Vec3 = (0.6, 0.6, 0.6)
    shininess: float = 32.0


@dataclass
class Light:
    position: Vec3 = (256.0, 300.0, 256.0)
    color: Vec3 = (1.0, 1.0, 1.0)


@dataclass
class FBMParams:
    frequency: float = 0.1
    octaves: int = 4
    persistence: float = 0.5