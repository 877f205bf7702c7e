# mapgen.py - seeded ring-by-ring expansion of the tile lattice
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .hexgrid import DIRECTIONS, ORIGIN, Coord, cube_to_world, neighbor
from .noise import NoiseLayers
from .settings import DEFAULT_MAP_CONFIG, MapConfig, PathConfig
from .terrain import TerrainClassifier
from .tile import HexGrid, Tile

logger = logging.getLogger(__name__)


def resolve_seed(seed: Optional[int], max_seed: int = 10_000_000) -> int:
    """Return ``seed``, or a fresh random one when it is 0 or None."""
    if seed:
        return int(seed)
    return int(np.random.default_rng().integers(0, max_seed))


class MapGenerator:
    """Builds a :class:`HexGrid` of ``config.radius`` rings around the origin.

    All randomness (noise offsets, decoration variants and yaw) comes from
    one ``numpy`` generator seeded with :attr:`seed`, so equal seeds give
    equal maps.  Each call to :meth:`generate` starts from scratch and
    returns a new grid.
    """

    def __init__(self, config: Optional[MapConfig] = None):
        self.config = config or DEFAULT_MAP_CONFIG
        self.seed: Optional[int] = None
        self.layers: Optional[NoiseLayers] = None
        self.grid: Optional[HexGrid] = None
        self._classifier: Optional[TerrainClassifier] = None

    def generate(self) -> HexGrid:
        cfg = self.config
        started = time.perf_counter()
        logger.info("Map generation started...")

        self.seed = resolve_seed(cfg.seed, cfg.max_seed)
        rng = np.random.default_rng(self.seed)
        logger.info("Map seed: %d", self.seed)

        self.layers = NoiseLayers.from_rng(rng, cfg.terrain_noise_scale,
                                           cfg.tree_noise_scale, cfg.max_seed)
        self._classifier = TerrainClassifier(cfg, self.layers, rng)
        self.grid = HexGrid(cfg.tile_size)

        frontier = [self._generate_tile(ORIGIN)]
        for _ in range(cfg.radius):
            frontier = self._generate_neighbours(frontier)
        self.grid.link_neighbors()

        logger.info("Map generation done: %.1fms, %d tiles generated",
                    (time.perf_counter() - started) * 1000.0, len(self.grid))
        return self.grid

    def _generate_neighbours(self, frontier: List[Tile]) -> List[Tile]:
        created: List[Tile] = []
        for tile in frontier:
            for d in DIRECTIONS:
                pos = neighbor(tile.grid_position, d)
                if pos in self.grid:
                    continue
                created.append(self._generate_tile(pos))
        return created

    def _generate_tile(self, grid_position: Coord) -> Tile:
        world_position = cube_to_world(grid_position, self.config.tile_size)
        c = self._classifier.classify(grid_position, world_position)
        return self.grid.add(Tile(
            grid_position=grid_position,
            world_position=world_position,
            height=c.height,
            terrain=c.terrain,
            walkable=c.walkable,
            decoration=c.decoration,
        ))


def generate(seed: Optional[int] = None, radius: Optional[int] = None,
             config: Optional[MapConfig] = None, **overrides) -> Tuple[HexGrid, int]:
    """Generate a map; returns the grid and the seed actually used.

    ``overrides`` are :class:`MapConfig` field names (``base_size``,
    ``water_threshold``, ...).
    """
    cfg = config or DEFAULT_MAP_CONFIG
    if seed is not None:
        overrides["seed"] = seed
    if radius is not None:
        overrides["radius"] = radius
    if overrides:
        cfg = cfg.replace(**overrides)
    gen = MapGenerator(cfg)
    grid = gen.generate()
    return grid, gen.seed


@dataclass
class World:
    """A generated map plus the settings that produced it."""

    config: MapConfig
    seed: int
    grid: HexGrid
    path_config: Optional[PathConfig] = None

    def tile_at(self, coord: Coord) -> Optional[Tile]:
        return self.grid.get(coord)

    def find_path(self, start: Tile, goal: Tile, step_offset: Optional[float] = None):
        return self.grid.find_path(start, goal, step_offset=step_offset, config=self.path_config)


def initialize(config: Optional[MapConfig] = None,
               path_config: Optional[PathConfig] = None) -> World:
    """Generate the world once at application start-up."""
    cfg = config or DEFAULT_MAP_CONFIG
    grid, seed = generate(config=cfg)
    return World(config=cfg, seed=seed, grid=grid, path_config=path_config)
