"""Neighbor generation for 6-connected movement through the grid."""

from typing import List, Tuple
from .types import Coord, Grid

Direction = Tuple[int, int, int]

# Fixed exploration order: +x, -x, +y, -y, +z, -z
DIRECTIONS: Tuple[Direction, ...] = (
    (1, 0, 0), (-1, 0, 0),
    (0, 1, 0), (0, -1, 0),
    (0, 0, 1), (0, 0, -1),
)


def step(coord: Coord, direction: Direction) -> Coord:
    """Offset a coordinate by one direction vector."""
    return (coord[0] + direction[0], coord[1] + direction[1], coord[2] + direction[2])


def get_neighbors(coord: Coord, grid: Grid) -> List[Coord]:
    """
    Get the open, in-bounds neighbors of a coordinate.
    Returned in DIRECTIONS order so searches stay reproducible.
    """
    neighbors = []
    for direction in DIRECTIONS:
        neighbor = step(coord, direction)
        if not grid.is_valid_coord(neighbor):
            continue
        if grid.get(neighbor):
            continue
        neighbors.append(neighbor)
    return neighbors


def manhattan_distance(a: Coord, b: Coord) -> int:
    """Sum of absolute per-axis differences."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) + abs(a[2] - b[2])


def is_adjacent(a: Coord, b: Coord) -> bool:
    """True if a and b differ by exactly one unit on exactly one axis."""
    return manhattan_distance(a, b) == 1
