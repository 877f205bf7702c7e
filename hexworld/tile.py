from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .hexgrid import DIRECTIONS, Coord, Direction, cube_distance, neighbor
from .terrain import Decoration, Terrain

# Fields fixed at generation time; only ``walkable`` and ``occupied`` change later
_WRITE_ONCE = frozenset({"grid_position", "world_position", "height", "terrain", "decoration"})


@dataclass(eq=False)
class Tile:
    grid_position: Coord
    world_position: Tuple[float, float, float]
    height: float = 1.0
    terrain: Terrain = Terrain.GRASS
    walkable: bool = True
    occupied: bool = False
    decoration: Decoration = Decoration.NONE
    # Direction -> neighbor grid position; the grid owns the tiles themselves
    neighbors: Dict[Direction, Coord] = field(default_factory=dict, repr=False)

    def __setattr__(self, name, value):
        if name in _WRITE_ONCE and name in self.__dict__:
            raise AttributeError(f"Tile.{name} is fixed after generation")
        object.__setattr__(self, name, value)

    @property
    def has_vegetation(self) -> bool:
        return self.decoration.placed

    @property
    def object_scale(self) -> Tuple[float, float, float]:
        """Scale for objects placed on the tile, cancelling its vertical stretch."""
        return (1.0, 1.0 / self.height, 1.0)

    def distance_from(self, other: "Tile") -> int:
        return cube_distance(self.grid_position, other.grid_position)


class HexGrid:
    """Owns every :class:`Tile`, keyed by cube position."""

    def __init__(self, tile_size: float = 2.0) -> None:
        self.tile_size = tile_size
        self._tiles: Dict[Coord, Tile] = {}

    def add(self, tile: Tile) -> Tile:
        key = tile.grid_position
        if key in self._tiles:
            raise ValueError(f"duplicate tile at {key!r}")
        self._tiles[key] = tile
        return tile

    def get(self, coord: Coord) -> Optional[Tile]:
        return self._tiles.get(tuple(coord))

    def __getitem__(self, coord: Coord) -> Tile:
        return self._tiles[tuple(coord)]

    def __contains__(self, item) -> bool:
        if isinstance(item, Tile):
            return self._tiles.get(item.grid_position) is item
        return tuple(item) in self._tiles

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles.values())

    def tiles(self) -> List[Tile]:
        return list(self._tiles.values())

    def positions(self) -> List[Coord]:
        return list(self._tiles.keys())

    # -- Neighbors -------------------------------------------------------------
    def link_neighbors(self) -> None:
        """Fill every tile's direction -> neighbor table.

        Run once all tiles exist so links do not depend on creation order.
        """
        for tile in self._tiles.values():
            tile.neighbors.clear()
            for d in DIRECTIONS:
                pos = neighbor(tile.grid_position, d)
                if pos in self._tiles:
                    tile.neighbors[d] = pos

    def neighbor(self, tile: Tile, direction: Direction) -> Optional[Tile]:
        pos = tile.neighbors.get(direction)
        return None if pos is None else self._tiles[pos]

    def neighbors(self, tile: Tile) -> List[Tile]:
        return [self._tiles[pos] for pos in tile.neighbors.values()]

    def walkable_neighbors(self, tile: Tile, step_offset: Optional[float] = None) -> List[Tile]:
        """Neighbors a mover on ``tile`` may step onto.

        Excludes non-walkable and occupied tiles and, when ``step_offset`` is
        given, any tile whose height differs by ``step_offset`` or more.
        """
        out: List[Tile] = []
        for n in self.neighbors(tile):
            if not n.walkable or n.occupied:
                continue
            if step_offset is not None and not abs(n.height - tile.height) < step_offset:
                continue
            out.append(n)
        return out

    # -- Queries ---------------------------------------------------------------
    def find_path(self, start: Tile, goal: Tile, step_offset: Optional[float] = None, config=None):
        from .pathfinding import find_path  # local import to avoid a cycle

        return find_path(self, start, goal, step_offset=step_offset, config=config)

    def snapshot(self) -> Tuple:
        """Comparable per-tile data, sorted by position."""
        return tuple(
            (t.grid_position, t.world_position, t.height, int(t.terrain), t.walkable, t.decoration)
            for _, t in sorted(self._tiles.items())
        )
