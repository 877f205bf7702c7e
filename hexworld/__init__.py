# hexworld/__init__.py
# Seeded hex-tile world generation and time-bounded path finding

from .hexgrid import (
    Direction, DIRECTIONS, ORIGIN, angle_to_offset, angle_to_direction, cube_distance,
    neighbors6, ring, spiral, cube_to_world, world_to_cube, cube_round, hex_polygon,
)
from .noise import NoiseField, NoiseLayers, perlin
from .settings import MapConfig, PathConfig, DEFAULT_MAP_CONFIG, DEFAULT_PATH_CONFIG
from .terrain import Terrain, Decoration, TerrainClassifier
from .tile import Tile, HexGrid
from .mapgen import MapGenerator, World, generate, initialize
from .pathfinding import Path, find_path

__version__ = "0.1.0"

__all__ = [
    "Direction", "DIRECTIONS", "ORIGIN", "angle_to_offset", "angle_to_direction", "cube_distance",
    "neighbors6", "ring", "spiral", "cube_to_world", "world_to_cube", "cube_round", "hex_polygon",
    "NoiseField", "NoiseLayers", "perlin",
    "MapConfig", "PathConfig", "DEFAULT_MAP_CONFIG", "DEFAULT_PATH_CONFIG",
    "Terrain", "Decoration", "TerrainClassifier",
    "Tile", "HexGrid",
    "MapGenerator", "World", "generate", "initialize",
    "Path", "find_path",
]
