"""Time-bounded A* over a generated :class:`~hexworld.tile.HexGrid`.

Step cost between adjacent tiles is the absolute height difference, so the
search minimizes climbing rather than distance.  The heuristic is the squared
world-space distance to the goal; it is not admissible, and the search is
meant as a best-effort one: when the goal is unreachable or the time budget
runs out, the path to the cheapest tile seen so far is returned with
``complete=False``.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

from .hexgrid import Coord
from .settings import DEFAULT_PATH_CONFIG, PathConfig
from .tile import HexGrid, Tile

logger = logging.getLogger(__name__)

# Patched in tests to simulate slow searches
_clock = time.monotonic


@dataclass
class Path:
    destination: Tile
    tiles: List[Tile] = field(default_factory=list)
    complete: bool = True
    # Index into ``tiles`` at which the caller should query again
    renew_at: int = 0

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    @property
    def end(self) -> Optional[Tile]:
        return self.tiles[-1] if self.tiles else None


def reconstruct(came_from: Dict[Coord, Coord], current: Coord) -> List[Coord]:
    """Walk predecessor links back to the start; the start itself is dropped."""
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path[1:]


def _cheapest(keys: Iterable[Coord], f_score: Dict[Coord, float]) -> Coord:
    # min() keeps the first of equal scores, i.e. insertion order
    return min(keys, key=f_score.__getitem__)


def find_path(grid: HexGrid, start: Tile, goal: Tile,
              step_offset: Optional[float] = None,
              config: Optional[PathConfig] = None) -> Path:
    """Search a route from ``start`` (exclusive) to ``goal`` (inclusive).

    Only walkable, unoccupied tiles are entered, and with ``step_offset``
    only those less than ``step_offset`` higher or lower than the current
    tile.  Never raises for unreachable goals or timeouts.
    """
    config = config or DEFAULT_PATH_CONFIG
    for t in (start, goal):
        if t not in grid:
            raise ValueError(f"tile {t.grid_position!r} does not belong to this grid")

    began = _clock()
    budget = config.time_budget_ms / 1000.0
    gx, gy, gz = goal.world_position

    def h(tile: Tile) -> float:
        x, y, z = tile.world_position
        return (x - gx) ** 2 + (y - gy) ** 2 + (z - gz) ** 2

    start_key = start.grid_position
    goal_key = goal.grid_position
    open_set: Dict[Coord, None] = {start_key: None}
    came_from: Dict[Coord, Coord] = {}
    g_score: Dict[Coord, float] = {start_key: 0.0}
    f_score: Dict[Coord, float] = {start_key: h(start)}

    def build(end: Coord, complete: bool) -> Path:
        if end == start_key:
            return Path(goal, [], complete=start_key == goal_key, renew_at=0)
        tiles = [grid[c] for c in reconstruct(came_from, end)]
        return Path(goal, tiles, complete=complete,
                    renew_at=int(len(tiles) * config.renew_ratio))

    while open_set:
        if _clock() - began > budget:
            logger.debug("path search %s -> %s timed out after %d tiles",
                         start_key, goal_key, len(f_score))
            return build(_cheapest(f_score, f_score), False)

        current = _cheapest(open_set, f_score)
        if current == goal_key:
            return build(current, True)

        del open_set[current]
        tile = grid[current]
        for n in grid.walkable_neighbors(tile, step_offset):
            key = n.grid_position
            tentative = g_score[current] + abs(tile.height - n.height)
            if tentative >= g_score.get(key, float("inf")):
                continue
            came_from[key] = current
            g_score[key] = tentative
            f_score[key] = tentative + h(n)
            if key not in open_set:
                open_set[key] = None

    logger.debug("path search %s -> %s exhausted, returning best effort", start_key, goal_key)
    return build(_cheapest(f_score, f_score), False)
