"""Core type definitions for the 3D maze engine."""

from dataclasses import dataclass, field
from typing import Iterator, List, Literal, Optional, Tuple

import numpy as np

# Coordinate type for grid positions
Coord = Tuple[int, int, int]

# Grid extents along x, y, z
Dimensions = Tuple[int, int, int]

Axis = Literal["x", "y", "z"]

AXES: Tuple[Axis, Axis, Axis] = ("x", "y", "z")

MIN_DIMENSION = 2
MIN_MAX_DIMENSION = 10
MAX_MAX_DIMENSION = 100

DEFAULT_DIMENSIONS: Dimensions = (10, 10, 5)
DEFAULT_MAX_DIMENSION = 50


class MazeError(Exception):
    """Base class for maze engine errors."""


class InvalidDimensionError(MazeError, ValueError):
    """Raised when a grid axis or the max dimension is out of range."""


class OutOfBoundsError(MazeError, IndexError):
    """Raised when a coordinate lies outside the grid extents."""


class Grid:
    """
    Dense 3D occupancy grid. True marks a wall.

    Storage is a numpy bool array indexed [x, y, z]. Every access is bounds
    checked; negative indices are rejected rather than wrapped.
    """

    def __init__(self, x: int, y: int, z: int):
        for axis, size in zip(AXES, (x, y, z)):
            if size < MIN_DIMENSION:
                raise InvalidDimensionError(
                    f"Grid dimension {axis} must be at least {MIN_DIMENSION}, got {size}"
                )
        self._cells = np.zeros((x, y, z), dtype=bool)

    @classmethod
    def from_array(cls, cells: np.ndarray) -> "Grid":
        """Build a grid from an existing 3D boolean array (copied)."""
        if cells.ndim != 3:
            raise InvalidDimensionError(f"Expected a 3D array, got {cells.ndim}D")
        grid = cls(*cells.shape)
        grid._cells[...] = cells.astype(bool)
        return grid

    @property
    def width(self) -> int:
        return self._cells.shape[0]

    @property
    def height(self) -> int:
        return self._cells.shape[1]

    @property
    def depth(self) -> int:
        return self._cells.shape[2]

    @property
    def dimensions(self) -> Dimensions:
        """Grid extents as an (x, y, z) tuple."""
        x, y, z = self._cells.shape
        return (x, y, z)

    @property
    def cell_count(self) -> int:
        return int(self._cells.size)

    @property
    def wall_count(self) -> int:
        return int(np.count_nonzero(self._cells))

    @property
    def wall_density(self) -> float:
        """Fraction of cells that are walls."""
        return self.wall_count / self.cell_count

    @property
    def read_only(self) -> bool:
        return not self._cells.flags.writeable

    def is_valid_coord(self, coord: Coord) -> bool:
        """Check if coordinate is within grid bounds."""
        x, y, z = coord
        return 0 <= x < self.width and 0 <= y < self.height and 0 <= z < self.depth

    def _check(self, coord: Coord) -> None:
        if not self.is_valid_coord(coord):
            raise OutOfBoundsError(
                f"Coordinate {tuple(coord)} outside grid {self.dimensions}"
            )

    def get(self, coord: Coord) -> bool:
        """Return True if the cell at coord is a wall."""
        self._check(coord)
        return bool(self._cells[coord[0], coord[1], coord[2]])

    def set(self, coord: Coord, is_wall: bool) -> None:
        """Mark the cell at coord as wall or open."""
        self._check(coord)
        self._cells[coord[0], coord[1], coord[2]] = is_wall

    def iter_walls(self) -> Iterator[Coord]:
        """Yield wall coordinates in x, then y, then z order."""
        for x, y, z in np.argwhere(self._cells):
            yield (int(x), int(y), int(z))

    def copy(self, read_only: bool = False) -> "Grid":
        """Return an independent copy, optionally frozen against writes."""
        clone = Grid.from_array(self._cells)
        if read_only:
            clone._cells.flags.writeable = False
        return clone

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        x, y, z = self.dimensions
        return f"Grid({x}x{y}x{z}, walls={self.wall_count})"


@dataclass
class MazeConfig:
    """Dimensions and generation settings for a maze."""
    x: int = DEFAULT_DIMENSIONS[0]
    y: int = DEFAULT_DIMENSIONS[1]
    z: int = DEFAULT_DIMENSIONS[2]
    max_dimension: int = DEFAULT_MAX_DIMENSION
    seed: Optional[int] = None

    @property
    def dimensions(self) -> Dimensions:
        return (self.x, self.y, self.z)

    def validate(self) -> None:
        """Raise InvalidDimensionError if any setting is out of range."""
        if not MIN_MAX_DIMENSION <= self.max_dimension <= MAX_MAX_DIMENSION:
            raise InvalidDimensionError(
                f"max_dimension must be in {MIN_MAX_DIMENSION}..{MAX_MAX_DIMENSION}, "
                f"got {self.max_dimension}"
            )
        for axis, size in zip(AXES, self.dimensions):
            if not MIN_DIMENSION <= size <= self.max_dimension:
                raise InvalidDimensionError(
                    f"Dimension {axis} must be in {MIN_DIMENSION}..{self.max_dimension}, got {size}"
                )


@dataclass
class SolveResult:
    """Result of a solve. An empty path with found=False means no path exists."""
    path: List[Coord] = field(default_factory=list)
    found: bool = False
    nodes_explored: int = 0

    @property
    def success(self) -> bool:
        """Whether a path was found."""
        return self.found and len(self.path) > 0

    @property
    def length(self) -> int:
        """Number of moves along the path."""
        return max(0, len(self.path) - 1)


def no_path(nodes_explored: int = 0) -> SolveResult:
    """Build the definitive 'unreachable' verdict."""
    return SolveResult(path=[], found=False, nodes_explored=nodes_explored)


@dataclass
class GeneratedMaze:
    """Output of one generation cycle."""
    grid: Grid
    start: Coord
    end: Coord
    path: List[Coord] = field(default_factory=list)
    repaired: bool = False

    def __iter__(self):
        # Unpacks as (grid, start, end, path)
        return iter((self.grid, self.start, self.end, self.path))


def clamp_dimension(value: int, max_dimension: int = DEFAULT_MAX_DIMENSION) -> int:
    """Clamp a requested axis size into 2..max_dimension."""
    return max(MIN_DIMENSION, min(max_dimension, int(value)))


def clamp_max_dimension(value: int) -> int:
    """Clamp a requested max dimension into 10..100."""
    return max(MIN_MAX_DIMENSION, min(MAX_MAX_DIMENSION, int(value)))


def clamp_coord(coord: Coord, dimensions: Dimensions) -> Coord:
    """Pull a coordinate back inside the given extents."""
    x, y, z = (max(0, min(size - 1, int(value))) for value, size in zip(coord, dimensions))
    return (x, y, z)
