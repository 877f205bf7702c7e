from __future__ import annotations

"""Tweakable generation and search parameters."""

import dataclasses
from dataclasses import dataclass
from typing import Optional, Tuple

from .hexgrid import ORIGIN, Coord, is_cube


@dataclass(frozen=True)
class MapConfig:
    """Constants driving map generation.

    Every value can be overridden per run; the defaults reproduce the
    reference terrain.  ``seed`` of 0 or None draws a random seed.
    """

    seed: Optional[int] = 0
    radius: int = 20
    tile_size: float = 2.0

    # Noise sampling
    terrain_noise_scale: float = 0.075
    tree_noise_scale: float = 0.06
    terrain_noise_multiplier: float = 7.5

    # Category thresholds on elevation, ascending
    water_threshold: float = 0.3
    sand_threshold: float = 0.35
    grass_threshold: float = 0.7
    # Half-width of the vegetation band around 0.5 tree noise
    tree_threshold: float = 0.05

    # Flat starting plateau around base_position
    base_level: Optional[float] = None  # None -> sand_threshold
    base_size: int = 3
    base_transition_size: int = 5
    base_position: Coord = ORIGIN

    tree_details: Tuple[str, ...] = ("bush", "stump", "flowers")

    # Exclusive bound for auto seeds and noise offsets
    max_seed: int = 10_000_000

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError("radius must be >= 0")
        if self.tile_size <= 0:
            raise ValueError("tile_size must be > 0")
        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be >= 0")
        if not (self.water_threshold <= self.sand_threshold <= self.grass_threshold):
            raise ValueError("thresholds must be ascending: water <= sand <= grass")
        if self.tree_threshold < 0:
            raise ValueError("tree_threshold must be >= 0")
        if self.base_size < 0:
            raise ValueError("base_size must be >= 0")
        if self.base_transition_size <= 0:
            raise ValueError("base_transition_size must be > 0")
        if not is_cube(self.base_position):
            raise ValueError(f"base_position {self.base_position!r} is not a cube coordinate")
        if self.max_seed <= 0:
            raise ValueError("max_seed must be > 0")
        object.__setattr__(self, "tree_details", tuple(self.tree_details))
        object.__setattr__(self, "base_position", tuple(self.base_position))

    @property
    def resolved_base_level(self) -> float:
        return self.sand_threshold if self.base_level is None else self.base_level

    def replace(self, **changes) -> "MapConfig":
        """Return a copy with ``changes`` applied (validated again)."""
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class PathConfig:
    """Search limits for :func:`hexworld.pathfinding.find_path`."""

    # Wall-clock budget per query, in milliseconds
    time_budget_ms: float = 100.0
    # Fraction of the path after which callers should re-query
    renew_ratio: float = 0.75

    def __post_init__(self) -> None:
        if self.time_budget_ms < 0:
            raise ValueError("time_budget_ms must be >= 0")
        if not 0.0 <= self.renew_ratio <= 1.0:
            raise ValueError("renew_ratio must be in [0, 1]")


# Global default instances used throughout the codebase
DEFAULT_MAP_CONFIG = MapConfig()
DEFAULT_PATH_CONFIG = PathConfig()
