"""Maze generation: wall placement, endpoint placement and the solvability guarantee."""
import pytest

from maze3d.domain.types import GeneratedMaze, InvalidDimensionError
from maze3d.domain.bfs import solve
from maze3d.domain.neighbors import manhattan_distance
from maze3d.domain.path import validate_path
from maze3d.utils.maze_factory import (
    add_center_weighted_walls, add_connector_walls, center_distance,
    connector_pass_count, create_empty_grid, generate_maze, min_separation,
    place_start_and_end, wall_probability,
)
from maze3d.utils.rng import SeededRNG


class FixedDrawRNG(SeededRNG):
    """Real integer draws, but random() always returns the same value."""

    def __init__(self, seed, draw):
        super().__init__(seed)
        self.draw = draw

    def random(self):
        return self.draw


SIZES = [(2, 2, 2), (3, 3, 3), (2, 6, 3), (10, 10, 5), (7, 4, 9)]


@pytest.mark.parametrize("dimensions", SIZES)
@pytest.mark.parametrize("seed", range(8))
def test_generated_maze_is_always_solvable(dimensions, seed):
    maze = generate_maze(*dimensions, rng=SeededRNG(seed))
    grid, start, end, path = maze

    assert grid.dimensions == dimensions
    assert not grid.get(start)
    assert not grid.get(end)
    assert manhattan_distance(start, end) >= max(dimensions) / 2

    final = solve(grid, start, end)
    assert final.found
    if maze.repaired:
        assert path == []
    else:
        assert path == final.path
        assert validate_path(path, grid, start, end)


def test_same_seed_gives_same_maze():
    first = generate_maze(8, 6, 4, seed=99)
    second = generate_maze(8, 6, 4, seed=99)
    assert first.grid == second.grid
    assert (first.start, first.end, first.path) == (second.start, second.end, second.path)


def test_fully_walled_draws_trigger_repair():
    maze = generate_maze(5, 5, 5, rng=FixedDrawRNG(3, 0.0))
    assert isinstance(maze, GeneratedMaze)
    assert maze.repaired
    assert maze.path == []

    result = solve(maze.grid, maze.start, maze.end)
    assert result.found
    # Every other cell started as a wall, so the carved corridor is the only route
    assert result.length == manhattan_distance(maze.start, maze.end)


def test_generate_rejects_small_dimensions():
    with pytest.raises(InvalidDimensionError):
        generate_maze(1, 4, 4, seed=0)


def test_wall_probability_is_densest_at_center():
    dims = (10, 10, 10)
    assert center_distance((5, 5, 5), dims) == 0
    assert wall_probability((5, 5, 5), dims) == pytest.approx(0.4)
    assert wall_probability((0, 0, 0), dims) < wall_probability((3, 3, 3), dims)
    assert wall_probability((0, 0, 0), dims) > 0.1


def test_axes_are_scaled_by_their_own_length():
    # Half an axis away from center is the same distance whatever the axis length
    assert center_distance((0, 5, 1), (10, 10, 2)) == pytest.approx(center_distance((5, 5, 0), (10, 10, 2)))


def test_center_weighted_walls_follow_draws():
    grid = create_empty_grid(4, 4, 4)
    assert add_center_weighted_walls(grid, FixedDrawRNG(0, 0.0)) == 64
    assert grid.wall_count == 64

    grid = create_empty_grid(4, 4, 4)
    assert add_center_weighted_walls(grid, FixedDrawRNG(0, 0.99)) == 0
    assert grid.wall_count == 0


def test_connector_passes_only_add_walls(rng):
    grid = create_empty_grid(10, 10, 5)
    passes = add_connector_walls(grid, rng)
    assert passes == connector_pass_count((10, 10, 5)) == 25
    assert 2 <= grid.wall_count <= 2 * passes


def test_connector_passes_skip_grids_without_interior(rng):
    grid = create_empty_grid(2, 8, 8)
    assert add_connector_walls(grid, rng) == 0
    assert grid.wall_count == 0


def test_connector_pass_count_rounds_down():
    assert connector_pass_count((3, 3, 3)) == 1
    assert connector_pass_count((2, 2, 2)) == 0


@pytest.mark.parametrize("dimensions", [(2, 2, 2), (10, 10, 5), (3, 20, 2)])
def test_endpoints_are_separated_and_cleared(dimensions, rng):
    grid = create_empty_grid(*dimensions)
    add_center_weighted_walls(grid, FixedDrawRNG(5, 0.0))
    start, end = place_start_and_end(grid, rng)
    assert grid.is_valid_coord(start) and grid.is_valid_coord(end)
    assert manhattan_distance(start, end) >= min_separation(dimensions)
    assert not grid.get(start)
    assert not grid.get(end)
