"""Seeded 2D gradient noise and fractal Brownian motion."""

from __future__ import annotations

import numpy as np

_PRIME_X = 501125321
_PRIME_Y = 1136930381
_HASH_MUL = 0x27D4EB2D
_DIAG = float(np.sqrt(0.5))
_GRAD_X = np.array([1.0, -1.0, 0.0, 0.0, _DIAG, -_DIAG, _DIAG, -_DIAG])
_GRAD_Y = np.array([0.0, 0.0, 1.0, -1.0, _DIAG, _DIAG, -_DIAG, -_DIAG])
_SCALE = float(np.sqrt(2.0))


def _prime(coords: np.ndarray, prime: int) -> np.ndarray:
    return (coords & 0xFFFFFFFF).astype(np.uint32) * np.uint32(prime)


def _quintic(t: np.ndarray) -> np.ndarray:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(a: np.ndarray, b: np.ndarray, t: np.ndarray) -> np.ndarray:
    return a + t * (b - a)


class PerlinNoise:
    """Perlin noise on a hashed gradient lattice, sampled at a fixed frequency."""

    def __init__(self, seed: int = 1337, frequency: float = 0.01) -> None:
        self.seed = int(seed)
        self.frequency = float(frequency)

    def _gradient(self, xp: np.ndarray, yp: np.ndarray, xd: np.ndarray, yd: np.ndarray) -> np.ndarray:
        h = np.uint32(self.seed & 0xFFFFFFFF) ^ xp ^ yp
        h = h * np.uint32(_HASH_MUL)
        idx = ((h ^ (h >> np.uint32(15))) & np.uint32(7)).astype(np.intp)
        return _GRAD_X[idx] * xd + _GRAD_Y[idx] * yd

    def get_noise(self, x, y):
        """Noise value in [-1, 1] at (x, y); accepts scalars or arrays."""
        xs = np.asarray(x, dtype=np.float64) * self.frequency
        ys = np.asarray(y, dtype=np.float64) * self.frequency
        scalar = xs.ndim == 0 and ys.ndim == 0
        xs, ys = np.broadcast_arrays(np.atleast_1d(xs), np.atleast_1d(ys))

        x0f = np.floor(xs)
        y0f = np.floor(ys)
        xd0 = xs - x0f
        yd0 = ys - y0f
        xd1 = xd0 - 1.0
        yd1 = yd0 - 1.0
        tx = _quintic(xd0)
        ty = _quintic(yd0)

        x0 = x0f.astype(np.int64)
        y0 = y0f.astype(np.int64)
        xp0 = _prime(x0, _PRIME_X)
        yp0 = _prime(y0, _PRIME_Y)
        xp1 = _prime(x0 + 1, _PRIME_X)
        yp1 = _prime(y0 + 1, _PRIME_Y)

        row0 = _lerp(self._gradient(xp0, yp0, xd0, yd0), self._gradient(xp1, yp0, xd1, yd0), tx)
        row1 = _lerp(self._gradient(xp0, yp1, xd0, yd1), self._gradient(xp1, yp1, xd1, yd1), tx)
        result = np.clip(_lerp(row0, row1, ty) * _SCALE, -1.0, 1.0)
        return float(result[0]) if scalar else result


def fbm_noise(noise: PerlinNoise, x, y, octaves: int = 4, persistence: float = 0.5):
    """Sum octaves of noise with halving amplitude and doubling frequency, normalised."""
    if octaves < 1:
        raise ValueError("octaves must be at least 1")
    total = 0.0
    amplitude = 1.0
    frequency = 1.0
    max_amplitude = 0.0
    xs = np.asarray(x, dtype=np.float64)
    ys = np.asarray(y, dtype=np.float64)
    for _ in range(octaves):
        total = total + noise.get_noise(xs * frequency, ys * frequency) * amplitude
        max_amplitude += amplitude
        amplitude *= persistence
        frequency *= 2.0
    result = total / max_amplitude
    if xs.ndim == 0 and ys.ndim == 0:
        return float(result)
    return result