"""Connectivity repair carving."""
import pytest

from maze3d.domain.types import Grid, OutOfBoundsError
from maze3d.domain.bfs import solve
from maze3d.domain.neighbors import manhattan_distance
from maze3d.domain.repair import carve_path, repair_connectivity


def test_repair_makes_isolated_endpoints_reachable(walled_grid):
    start, end = (0, 0, 0), (3, 3, 2)
    grid = walled_grid((4, 4, 3), [start, end])
    assert not solve(grid, start, end).found

    repaired = repair_connectivity(grid, start, end)
    result = solve(repaired, start, end)
    assert result.found
    assert result.length == manhattan_distance(start, end)


def test_repair_leaves_input_grid_untouched(walled_grid):
    start, end = (0, 0, 0), (2, 2, 2)
    grid = walled_grid((3, 3, 3), [start, end])
    before = grid.copy()
    repair_connectivity(grid, start, end)
    assert grid == before


def test_carve_closes_x_then_y_then_z(walled_grid):
    start, end = (2, 0, 1), (0, 2, 0)
    grid = walled_grid((3, 3, 2), [start, end])
    carved = carve_path(grid, start, end)
    assert carved == [
        (2, 0, 1), (1, 0, 1), (0, 0, 1), (0, 1, 1), (0, 2, 1), (0, 2, 0),
    ]
    assert not any(grid.get(cell) for cell in carved)
    # Only the corridor was opened
    assert grid.cell_count - grid.wall_count == len(carved)


def test_carved_corridor_is_the_only_route(walled_grid):
    start, end = (0, 3, 0), (3, 0, 2)
    grid = walled_grid((4, 4, 3), [start, end])
    carved = carve_path(grid, start, end)
    assert solve(grid, start, end).path == carved


def test_carve_is_a_no_op_when_start_equals_end():
    grid = Grid(2, 2, 2)
    grid.set((1, 0, 1), True)
    assert carve_path(grid, (0, 1, 0), (0, 1, 0)) == [(0, 1, 0)]
    assert grid.wall_count == 1


def test_carve_rejects_out_of_bounds_endpoints():
    grid = Grid(2, 2, 2)
    with pytest.raises(OutOfBoundsError):
        carve_path(grid, (0, 0, 0), (2, 0, 0))
