"""Path reconstruction and validation utilities."""

from typing import Dict, List, Tuple
from .types import Coord, Grid
from .neighbors import is_adjacent


def reconstruct_path(parents: Dict[Coord, Coord], start: Coord, end: Coord) -> List[Coord]:
    """
    Walk parent links from end back to start.
    Returns the path from start to end (reversed from parent chain).
    """
    path = [end]
    current = end
    while current != start:
        current = parents[current]
        path.append(current)

    # Reverse to get path from start to end
    path.reverse()
    return path


def get_path_segments(path: List[Coord]) -> List[Tuple[Coord, Coord]]:
    """Consecutive (from, to) pairs along a path, one per move."""
    return list(zip(path, path[1:]))


def validate_path(path: List[Coord], grid: Grid, start: Coord, end: Coord) -> bool:
    """
    Validate that a path runs from start to end through open cells
    with single-axis unit steps.
    """
    if not path:
        return False
    if path[0] != start or path[-1] != end:
        return False

    for coord in path:
        if not grid.is_valid_coord(coord) or grid.get(coord):
            return False

    return all(is_adjacent(a, b) for a, b in get_path_segments(path))
