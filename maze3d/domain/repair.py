"""Connectivity repair for mazes that came out unsolvable."""

import logging
from typing import List

from .types import Coord, Grid, OutOfBoundsError

LOGGER = logging.getLogger(__name__)


def carve_path(grid: Grid, start: Coord, end: Coord) -> List[Coord]:
    """
    Clear an axis-stacked corridor from start to end in place.

    The cursor closes the x gap first, then y, then z, one cell per step,
    clearing each cell it enters. Returns the corridor, start first.
    """
    for coord in (start, end):
        if not grid.is_valid_coord(coord):
            raise OutOfBoundsError(f"Coordinate {tuple(coord)} outside grid {grid.dimensions}")

    cursor = list(start)
    carved: List[Coord] = [tuple(start)]
    while tuple(cursor) != tuple(end):
        for axis in range(3):
            if cursor[axis] != end[axis]:
                cursor[axis] += 1 if cursor[axis] < end[axis] else -1
                break
        cell = (cursor[0], cursor[1], cursor[2])
        grid.set(cell, False)
        carved.append(cell)
    return carved


def repair_connectivity(grid: Grid, start: Coord, end: Coord) -> Grid:
    """
    Return a copy of grid in which end is reachable from start.

    Only the carved corridor changes; start itself is left as found, so
    callers are expected to have cleared both endpoints already.
    """
    repaired = grid.copy()
    carved = carve_path(repaired, start, end)
    cleared = sum(1 for cell in carved[1:] if grid.get(cell))
    LOGGER.debug("Carved %d cells from %s to %s, %d were walls", len(carved), start, end, cleared)
    return repaired
