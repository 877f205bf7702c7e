# hexgrid.py - Flat-top hex cube math and helpers (Python 3.10+)
from __future__ import annotations
import math
from enum import Enum
from typing import Iterator, List, Tuple

SQRT3 = math.sqrt(3.0)
Coord = Tuple[int, int, int]
ORIGIN: Coord = (0, 0, 0)


class Direction(Enum):
    """The six principal directions of a flat-top lattice, keyed by angle."""

    EAST = 0
    SOUTH_EAST = 60
    SOUTH_WEST = 120
    WEST = 180
    NORTH_WEST = 240
    NORTH_EAST = 300

    @property
    def angle(self) -> int:
        return self.value

    @property
    def offset(self) -> Coord:
        return _OFFSETS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def opposite(self) -> "Direction":
        return Direction((self.value + 180) % 360)

    @classmethod
    def from_angle(cls, angle: float) -> "Direction":
        try:
            a = float(angle)
        except (TypeError, ValueError):
            raise ValueError(f"invalid angle: {angle!r}") from None
        if not a.is_integer() or int(a) not in _BY_ANGLE:
            raise ValueError(f"invalid angle: {angle!r}")
        return _BY_ANGLE[int(a)]


_OFFSETS = {
    Direction.EAST: (1, 0, -1),
    Direction.SOUTH_EAST: (1, -1, 0),
    Direction.SOUTH_WEST: (0, -1, 1),
    Direction.WEST: (-1, 0, 1),
    Direction.NORTH_WEST: (-1, 1, 0),
    Direction.NORTH_EAST: (0, 1, -1),
}

_LABELS = {
    Direction.EAST: "East",
    Direction.SOUTH_EAST: "South-east",
    Direction.SOUTH_WEST: "South-west",
    Direction.WEST: "West",
    Direction.NORTH_WEST: "North-west",
    Direction.NORTH_EAST: "North-east",
}

_BY_ANGLE = {d.value: d for d in Direction}

# Generation order: 0, 60, ..., 300 degrees
DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


def angle_to_offset(angle: float) -> Coord:
    """Cube delta for a neighbor at ``angle`` degrees."""
    return Direction.from_angle(angle).offset


def angle_to_direction(angle: float) -> str:
    """Human readable direction name for ``angle`` degrees."""
    return Direction.from_angle(angle).label


def is_cube(c: Coord) -> bool:
    return len(c) == 3 and c[0] + c[1] + c[2] == 0


def _check(c: Coord) -> Coord:
    if not is_cube(c):
        raise ValueError(f"not a cube coordinate: {c!r}")
    return c


def cube_add(a: Coord, b: Coord) -> Coord:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def cube_distance(a: Coord, b: Coord) -> int:
    """Return hex distance between two cube coords."""
    return (abs(a[0] - b[0]) + abs(a[1] - b[1]) + abs(a[2] - b[2])) // 2


def neighbor(c: Coord, direction: Direction) -> Coord:
    return cube_add(c, direction.offset)


def neighbors6(c: Coord) -> List[Coord]:
    """Return the six cube neighbors of ``c`` in direction order."""
    _check(c)
    return [cube_add(c, d.offset) for d in DIRECTIONS]


def ring(center: Coord, radius: int) -> List[Coord]:
    """All cells at exactly ``radius`` steps from ``center``."""
    _check(center)
    if radius < 0:
        raise ValueError("radius must be >= 0")
    if radius == 0:
        return [center]
    out: List[Coord] = []
    # Start radius steps towards NORTH_WEST, then walk the six sides
    c = center
    for _ in range(radius):
        c = neighbor(c, Direction.NORTH_WEST)
    for d in DIRECTIONS:
        for _ in range(radius):
            out.append(c)
            c = neighbor(c, d)
    return out


def spiral(center: Coord, radius: int) -> Iterator[Coord]:
    """Yield every cell within ``radius`` of ``center``, innermost first."""
    for k in range(radius + 1):
        yield from ring(center, k)


def cube_to_world(c: Coord, tile_size: float) -> Tuple[float, float, float]:
    """Cube coords -> world (x, y, z) on the horizontal plane.

    A neighbor at angle ``a`` sits at ``(tile_size*cos a, 0, tile_size*sin a)``
    from its origin cell.
    """
    _check(c)
    _, y, z = c
    wx = -tile_size * (z + 0.5 * y)
    wz = -tile_size * SQRT3 / 2.0 * y
    return wx, 0.0, wz


def world_to_cube(x: float, z: float, tile_size: float) -> Coord:
    """Approximate inverse of :func:`cube_to_world`, rounded to the nearest hex."""
    if tile_size == 0:
        raise ValueError("tile_size must be non-zero")
    fy = -2.0 * z / (SQRT3 * tile_size)
    fz = -x / tile_size - 0.5 * fy
    fx = -fy - fz
    return cube_round(fx, fy, fz)


def cube_round(x: float, y: float, z: float) -> Coord:
    """Round fractional cube coordinates to nearest hex."""
    rx, ry, rz = round(x), round(y), round(z)

    dx = abs(rx - x)
    dy = abs(ry - y)
    dz = abs(rz - z)

    if dx > dy and dx > dz:
        rx = -ry - rz
    elif dy > dz:
        ry = -rx - rz
    else:
        rz = -rx - ry

    return int(rx), int(ry), int(rz)


def hex_polygon(c: Coord, tile_size: float) -> List[Tuple[float, float]]:
    """Return the 6 (x, z) corner points of a cell's footprint."""
    cx, _, cz = cube_to_world(c, tile_size)
    # Neighbor centers are tile_size apart, so the circumradius is size/sqrt(3)
    r = tile_size / SQRT3
    pts: List[Tuple[float, float]] = []
    for i in range(6):
        angle = math.radians(60 * i + 30)
        pts.append((cx + r * math.cos(angle), cz + r * math.sin(angle)))
    return pts
