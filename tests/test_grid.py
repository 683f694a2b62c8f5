"""Grid storage, bounds checking and configuration validation."""
import numpy as np
import pytest

from maze3d.domain.types import (
    Grid, MazeConfig, InvalidDimensionError, OutOfBoundsError, MazeError,
    clamp_coord, clamp_dimension, clamp_max_dimension,
)


def test_new_grid_has_no_walls():
    grid = Grid(4, 3, 2)
    assert grid.dimensions == (4, 3, 2)
    assert grid.cell_count == 24
    assert grid.wall_count == 0
    assert not any(grid.get((x, y, z)) for x in range(4) for y in range(3) for z in range(2))


@pytest.mark.parametrize("dimensions", [(1, 5, 5), (5, 1, 5), (5, 5, 1), (0, 2, 2), (2, 2, -3)])
def test_dimension_below_two_is_rejected(dimensions):
    with pytest.raises(InvalidDimensionError):
        Grid(*dimensions)


def test_set_and_get_round_trip_single_cell():
    grid = Grid(3, 3, 3)
    grid.set((1, 2, 0), True)
    assert grid.get((1, 2, 0)) is True
    assert grid.wall_count == 1
    grid.set((1, 2, 0), False)
    assert grid.get((1, 2, 0)) is False


@pytest.mark.parametrize("coord", [(3, 0, 0), (0, 3, 0), (0, 0, 2), (-1, 0, 0), (0, -1, 1)])
def test_out_of_bounds_access_fails(coord):
    grid = Grid(3, 3, 2)
    with pytest.raises(OutOfBoundsError):
        grid.get(coord)
    with pytest.raises(OutOfBoundsError):
        grid.set(coord, True)


def test_errors_share_a_base_class():
    assert issubclass(InvalidDimensionError, MazeError)
    assert issubclass(OutOfBoundsError, IndexError)
    assert issubclass(InvalidDimensionError, ValueError)


def test_copy_is_independent():
    grid = Grid(2, 2, 2)
    clone = grid.copy()
    clone.set((1, 1, 1), True)
    assert not grid.get((1, 1, 1))
    assert clone != grid


def test_read_only_copy_rejects_writes():
    grid = Grid(2, 2, 2)
    frozen = grid.copy(read_only=True)
    assert frozen.read_only
    with pytest.raises(ValueError):
        frozen.set((0, 0, 0), True)
    # Copying a frozen grid gives a writable one again
    thawed = frozen.copy()
    thawed.set((0, 0, 0), True)
    assert thawed.get((0, 0, 0))


def test_iter_walls_in_axis_order():
    grid = Grid(3, 2, 2)
    for coord in [(2, 0, 1), (0, 1, 0), (0, 0, 1)]:
        grid.set(coord, True)
    assert list(grid.iter_walls()) == [(0, 0, 1), (0, 1, 0), (2, 0, 1)]


def test_from_array_copies_input():
    cells = np.zeros((2, 3, 2), dtype=bool)
    cells[1, 2, 1] = True
    grid = Grid.from_array(cells)
    cells[0, 0, 0] = True
    assert grid.get((1, 2, 1))
    assert not grid.get((0, 0, 0))
    assert grid.wall_density == pytest.approx(1 / 12)


def test_from_array_rejects_non_3d():
    with pytest.raises(InvalidDimensionError):
        Grid.from_array(np.zeros((3, 3), dtype=bool))


def test_default_config_is_valid():
    config = MazeConfig()
    assert config.dimensions == (10, 10, 5)
    assert config.max_dimension == 50
    config.validate()


@pytest.mark.parametrize("kwargs", [
    {"max_dimension": 9},
    {"max_dimension": 101},
    {"x": 1},
    {"z": 51},
    {"x": 20, "max_dimension": 10},
])
def test_invalid_config_is_rejected(kwargs):
    with pytest.raises(InvalidDimensionError):
        MazeConfig(**kwargs).validate()


def test_clamping_helpers():
    assert clamp_dimension(1, 50) == 2
    assert clamp_dimension(75, 50) == 50
    assert clamp_dimension(7, 50) == 7
    assert clamp_max_dimension(3) == 10
    assert clamp_max_dimension(250) == 100
    assert clamp_coord((9, -2, 4), (5, 5, 5)) == (4, 0, 4)
