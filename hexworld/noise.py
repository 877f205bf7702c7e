# noise.py - 2D gradient (Perlin) noise sampled per tile
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

# One shared permutation table: every field samples the same noise function
# and is decorrelated from the others only by its offset.
_PERM = np.random.RandomState(0).permutation(256).astype(np.int64)
_PERM = np.concatenate([_PERM, _PERM])

# Corner gradients (±1, ±1)
_GRAD = np.array([[1.0, 1.0], [-1.0, 1.0], [1.0, -1.0], [-1.0, -1.0]])


def _fade(t: np.ndarray) -> np.ndarray:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _dot(h: np.ndarray, x: np.ndarray, y: np.ndarray) -> np.ndarray:
    g = _GRAD[h & 3]
    return g[..., 0] * x + g[..., 1] * y


def perlin(x, z) -> np.ndarray:
    """Gradient noise at ``(x, z)`` mapped to ``[0, 1]``.

    Accepts scalars or arrays of matching shape.  Integer lattice points
    always sample to exactly 0.5.
    """
    x = np.asarray(x, dtype=np.float64)
    z = np.asarray(z, dtype=np.float64)
    x0 = np.floor(x)
    z0 = np.floor(z)
    xf = x - x0
    zf = z - z0
    xi = x0.astype(np.int64) & 255
    zi = z0.astype(np.int64) & 255

    aa = _PERM[_PERM[xi] + zi]
    ab = _PERM[_PERM[xi] + zi + 1]
    ba = _PERM[_PERM[xi + 1] + zi]
    bb = _PERM[_PERM[xi + 1] + zi + 1]

    u = _fade(xf)
    v = _fade(zf)
    n00 = _dot(aa, xf, zf)
    n10 = _dot(ba, xf - 1.0, zf)
    n01 = _dot(ab, xf, zf - 1.0)
    n11 = _dot(bb, xf - 1.0, zf - 1.0)
    nx0 = n00 + u * (n10 - n00)
    nx1 = n01 + u * (n11 - n01)
    n = nx0 + v * (nx1 - nx0)
    return np.clip(0.5 * (n + 1.0), 0.0, 1.0)


@dataclass(frozen=True)
class NoiseField:
    """One noise layer: ``perlin((x + offset) * scale, (z + offset) * scale)``."""

    offset: float
    scale: float

    def sample(self, x: float, z: float) -> float:
        return float(perlin((x + self.offset) * self.scale, (z + self.offset) * self.scale))

    def sample_many(self, xs, zs) -> np.ndarray:
        xs = np.asarray(xs, dtype=np.float64)
        zs = np.asarray(zs, dtype=np.float64)
        return perlin((xs + self.offset) * self.scale, (zs + self.offset) * self.scale)


@dataclass(frozen=True)
class NoiseLayers:
    terrain: NoiseField
    trees: NoiseField
    tree_details: NoiseField

    @property
    def offsets(self) -> Tuple[float, float, float]:
        return self.terrain.offset, self.trees.offset, self.tree_details.offset

    @classmethod
    def from_rng(cls, rng: np.random.Generator, terrain_scale: float,
                 tree_scale: float, max_offset: int = 10_000_000) -> "NoiseLayers":
        """Draw the three offsets, in order terrain, trees, tree details."""
        terrain = int(rng.integers(0, max_offset))
        trees = int(rng.integers(0, max_offset))
        details = int(rng.integers(0, max_offset))
        return cls(
            terrain=NoiseField(terrain, terrain_scale),
            trees=NoiseField(trees, tree_scale),
            tree_details=NoiseField(details, tree_scale),
        )
