from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Optional, Tuple

import numpy as np

from .hexgrid import Coord, cube_distance
from .noise import NoiseLayers
from .sampling import sample
from .settings import MapConfig

logger = logging.getLogger(__name__)


class Terrain(IntEnum):
    WATER = 0
    SAND = 1
    GRASS = 2
    ROCK = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Decoration:
    """What, if anything, a renderer should place on a tile.

    ``kind`` is ``"none"``, ``"default"`` (the regular vegetation object)
    or ``"detail"``, in which case ``variant`` indexes
    :attr:`MapConfig.tree_details`.  ``yaw`` is in whole degrees.
    """

    kind: str = "none"
    variant: Optional[int] = None
    yaw: int = 0

    NONE: ClassVar["Decoration"]

    @property
    def placed(self) -> bool:
        return self.kind != "none"


Decoration.NONE = Decoration()


@dataclass(frozen=True)
class Classification:
    terrain: Terrain
    height: float
    walkable: bool
    decoration: Decoration
    elevation: float


def elevation_to_terrain(elevation: float, config: MapConfig) -> Terrain:
    if elevation < config.water_threshold:
        return Terrain.WATER
    if elevation < config.sand_threshold:
        return Terrain.SAND
    if elevation < config.grass_threshold:
        return Terrain.GRASS
    return Terrain.ROCK


def terrain_height(terrain: Terrain, elevation: float, config: MapConfig) -> float:
    """Vertical scale of a tile; water stays at the base scale."""
    if terrain is Terrain.WATER:
        return 1.0
    return 1.0 + (elevation - config.water_threshold) * config.terrain_noise_multiplier


class TerrainClassifier:
    """Turns noise samples into a terrain category, height and decoration.

    Cells within ``base_size`` of the base are forced flat at the base level
    and never vegetated.  The next ``base_transition_size`` rings blend
    linearly from the base level to the raw terrain noise, leaving a ramp
    around the starting plateau.  ``rng`` is consumed only for vegetated
    grass cells (detail variant first, then yaw).
    """

    def __init__(self, config: MapConfig, layers: NoiseLayers, rng: np.random.Generator):
        self.config = config
        self.layers = layers
        self.rng = rng

    def noise_at(self, grid_position: Coord, world_position: Tuple[float, float, float]) -> Tuple[float, float]:
        """Return ``(elevation, tree_noise)`` after applying the base plateau."""
        cfg = self.config
        x, _, z = world_position
        base = cfg.resolved_base_level
        distance = cube_distance(grid_position, cfg.base_position)

        if distance <= cfg.base_size:
            return base, 0.0

        elevation = self.layers.terrain.sample(x, z)
        tree = self.layers.trees.sample(x, z)
        if distance <= cfg.base_size + cfg.base_transition_size:
            ratio = (distance - cfg.base_size) / cfg.base_transition_size
            elevation = base + (elevation - base) * ratio
        return elevation, tree

    def classify(self, grid_position: Coord, world_position: Tuple[float, float, float]) -> Classification:
        elevation, tree = self.noise_at(grid_position, world_position)
        terrain = elevation_to_terrain(elevation, self.config)
        height = terrain_height(terrain, elevation, self.config)
        walkable = terrain is not Terrain.WATER
        decoration = Decoration.NONE

        if terrain is Terrain.GRASS:
            decoration = self.vegetation(world_position, tree)
            if decoration.placed:
                walkable = False

        return Classification(terrain, height, walkable, decoration, elevation)

    def vegetation(self, world_position: Tuple[float, float, float], tree: float) -> Decoration:
        t = self.config.tree_threshold
        if not (0.5 - t < tree < 0.5 + t):
            return Decoration.NONE

        x, _, z = world_position
        diff = abs(tree - 0.5)
        details = self.layers.tree_details.sample(x, z)
        kind, variant = "default", None
        if diff > t * 0.8 and details > 0.5:
            variant = sample(self.rng, range(len(self.config.tree_details)))
            if variant is None:
                logger.warning("no tree detail variants configured, using default vegetation")
            else:
                kind = "detail"
        yaw = int(self.rng.integers(0, 360))
        return Decoration(kind, variant, yaw)
