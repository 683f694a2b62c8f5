"""Maze factory for creating grids, placing walls and endpoints, and generating solvable mazes."""

import logging
import math
from typing import Optional, Tuple

from ..domain.types import Coord, Dimensions, Grid, GeneratedMaze
from ..domain.neighbors import DIRECTIONS, manhattan_distance, step
from ..domain.bfs import solve
from ..domain.repair import repair_connectivity
from .rng import SeededRNG, default_rng

LOGGER = logging.getLogger(__name__)

# Wall probability is BASE at the grid's edge, rising toward the center
CENTER_WALL_WEIGHT = 0.3
BASE_WALL_PROBABILITY = 0.1

# Connector passes per cell
CONNECTOR_RATE = 0.05


def create_empty_grid(x: int, y: int, z: int) -> Grid:
    """
    Create a new grid with no walls.

    Raises:
        InvalidDimensionError: If any axis is smaller than 2
    """
    return Grid(x, y, z)


def center_distance(coord: Coord, dimensions: Dimensions) -> float:
    """Euclidean distance from the grid center with each axis scaled by its own length."""
    return math.sqrt(sum(
        ((value - size / 2) / size) ** 2 for value, size in zip(coord, dimensions)
    ))


def wall_probability(coord: Coord, dimensions: Dimensions) -> float:
    """Chance that a cell starts out as a wall; denser toward the center."""
    return CENTER_WALL_WEIGHT * (1 - center_distance(coord, dimensions)) + BASE_WALL_PROBABILITY


def add_center_weighted_walls(grid: Grid, rng: Optional[SeededRNG] = None) -> int:
    """
    Sample one wall decision per cell, visiting x, then y, then z.

    Returns:
        Number of walls placed
    """
    if rng is None:
        rng = default_rng

    dimensions = grid.dimensions
    placed = 0
    for x in range(grid.width):
        for y in range(grid.height):
            for z in range(grid.depth):
                coord = (x, y, z)
                if rng.chance(wall_probability(coord, dimensions)):
                    grid.set(coord, True)
                    placed += 1
    return placed


def connector_pass_count(dimensions: Dimensions) -> int:
    x, y, z = dimensions
    return math.floor(x * y * z * CONNECTOR_RATE)


def add_connector_walls(grid: Grid, rng: Optional[SeededRNG] = None) -> int:
    """
    Thicken wall structure with short two-cell segments.

    Each pass picks an interior cell and one of the six directions and walls
    off both the cell and its neighbor that way. Grids with an axis shorter
    than 3 have no interior, so no passes run.

    Returns:
        Number of passes performed
    """
    if rng is None:
        rng = default_rng

    if min(grid.dimensions) < 3:
        LOGGER.debug("Grid %s has no interior; skipping connector walls", grid.dimensions)
        return 0

    passes = connector_pass_count(grid.dimensions)
    for _ in range(passes):
        cell = rng.coord((1, 1, 1), (grid.width - 2, grid.height - 2, grid.depth - 2))
        direction = rng.choice(DIRECTIONS)
        grid.set(cell, True)
        grid.set(step(cell, direction), True)
    return passes


def min_separation(dimensions: Dimensions) -> float:
    """Minimum Manhattan distance required between start and end."""
    return max(dimensions) / 2


def random_coord(dimensions: Dimensions, rng: SeededRNG) -> Coord:
    x, y, z = dimensions
    return rng.coord((0, 0, 0), (x - 1, y - 1, z - 1))


def place_start_and_end(grid: Grid, rng: Optional[SeededRNG] = None) -> Tuple[Coord, Coord]:
    """
    Pick start and end positions and clear both cells.

    Start is uniform over the grid. End is resampled until it is at least
    min_separation() away from start, which is always satisfiable for
    axes of length 2 or more.

    Returns:
        Tuple of (start_coord, end_coord)
    """
    if rng is None:
        rng = default_rng

    dimensions = grid.dimensions
    required = min_separation(dimensions)

    start = random_coord(dimensions, rng)
    end = random_coord(dimensions, rng)
    while manhattan_distance(start, end) < required:
        end = random_coord(dimensions, rng)

    grid.set(start, False)
    grid.set(end, False)
    return start, end


def generate_maze(x: int, y: int, z: int, rng: Optional[SeededRNG] = None,
                  seed: Optional[int] = None) -> GeneratedMaze:
    """
    Generate a solvable maze.

    Args:
        x, y, z: Grid dimensions (each at least 2)
        rng: Source of uniform randomness; takes precedence over seed
        seed: Seed for a fresh SeededRNG when rng is not given

    Returns:
        GeneratedMaze. When the random walls cut start off from end the
        grid is repaired and the returned path is empty; solve the repaired
        grid again to get an explicit path.
    """
    if rng is None:
        rng = SeededRNG(seed) if seed is not None else default_rng

    grid = create_empty_grid(x, y, z)
    walls = add_center_weighted_walls(grid, rng)
    passes = add_connector_walls(grid, rng)
    start, end = place_start_and_end(grid, rng)
    LOGGER.debug(
        "Placed %d random walls and %d connector passes; start=%s end=%s",
        walls, passes, start, end,
    )

    result = solve(grid, start, end)
    if result.found:
        LOGGER.info(
            "Generated %dx%dx%d maze: %d walls, path length %d",
            x, y, z, grid.wall_count, result.length,
        )
        return GeneratedMaze(grid=grid, start=start, end=end, path=result.path)

    LOGGER.info("Maze %dx%dx%d unsolvable from %s to %s; repairing", x, y, z, start, end)
    repaired = repair_connectivity(grid, start, end)
    return GeneratedMaze(grid=repaired, start=start, end=end, path=[], repaired=True)
