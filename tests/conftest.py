"""Pytest configuration for the maze3d test suite."""
import sys
from pathlib import Path

import pytest

# Make the repository root importable so analyze_maze.py resolves without installation
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from maze3d.domain.types import Grid
from maze3d.utils.rng import SeededRNG


@pytest.fixture
def rng():
    return SeededRNG(1234)


@pytest.fixture
def walled_grid():
    """Build a grid that is all walls except the given open cells."""
    def build(dimensions, open_cells=()):
        grid = Grid(*dimensions)
        for x in range(grid.width):
            for y in range(grid.height):
                for z in range(grid.depth):
                    grid.set((x, y, z), True)
        for coord in open_cells:
            grid.set(coord, False)
        return grid
    return build
