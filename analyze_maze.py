#!/usr/bin/env python3
"""
Generate a 3D maze and analyze it: solvability, path length, reachable space.
"""
import argparse
import logging
import sys
from collections import deque

from maze3d.domain.types import (
    DEFAULT_DIMENSIONS, DEFAULT_MAX_DIMENSION, MazeConfig, MazeError, SolveResult, clamp_coord,
)
from maze3d.domain.bfs import solve
from maze3d.domain.neighbors import get_neighbors
from maze3d.utils.maze_factory import generate_maze
from maze3d.utils.rng import SeededRNG


def visualize_layers(grid, start, end, path):
    """Print each z-layer as ASCII art."""
    on_path = set(path or [])
    for z in range(grid.depth):
        print(f"z = {z}")
        for y in range(grid.height):
            row = []
            for x in range(grid.width):
                coord = (x, y, z)
                if coord == start:
                    row.append('S')
                elif coord == end:
                    row.append('E')
                elif grid.get(coord):
                    row.append('#')
                elif coord in on_path:
                    row.append('*')
                else:
                    row.append('.')
            print(''.join(row))
        print()


def reachable_from(grid, origin):
    """All open cells connected to origin."""
    if grid.get(origin):
        return set()
    queue = deque([origin])
    reachable = {origin}
    while queue:
        current = queue.popleft()
        for neighbor in get_neighbors(current, grid):
            if neighbor not in reachable:
                reachable.add(neighbor)
                queue.append(neighbor)
    return reachable


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate and analyze a 3D maze")
    parser.add_argument("--size", type=int, nargs=3, metavar=("X", "Y", "Z"),
                        default=list(DEFAULT_DIMENSIONS), help="Maze dimensions")
    parser.add_argument("--max-dimension", type=int, default=DEFAULT_MAX_DIMENSION,
                        help="Upper bound for each dimension (10-100)")
    parser.add_argument("--seed", type=int, help="Seed for reproducible mazes")
    parser.add_argument("--start", type=int, nargs=3, metavar=("X", "Y", "Z"),
                        help="Override the generated start point")
    parser.add_argument("--end", type=int, nargs=3, metavar=("X", "Y", "Z"),
                        help="Override the generated end point")
    parser.add_argument("--layers", action="store_true", help="Print every z-layer")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s")

    x, y, z = args.size
    config = MazeConfig(x=x, y=y, z=z, max_dimension=args.max_dimension, seed=args.seed)
    try:
        config.validate()
    except MazeError as e:
        print(f"Invalid configuration: {e}")
        return 2

    maze = generate_maze(x, y, z, rng=SeededRNG(args.seed))
    grid, start, end, path = maze

    print(f"Dimensions: {x}x{y}x{z}" + (f" (seed {args.seed})" if args.seed is not None else ""))
    print(f"Wall count: {grid.wall_count} ({grid.wall_density * 100:.1f}%)")
    print(f"Start: {start}")
    print(f"End: {end}")
    if maze.repaired:
        print("Random walls cut start off from end; a corridor was carved")

    edited = args.start is not None or args.end is not None
    if args.start is not None:
        start = clamp_coord(tuple(args.start), grid.dimensions)
    if args.end is not None:
        end = clamp_coord(tuple(args.end), grid.dimensions)
    result = SolveResult(path=path, found=bool(path))
    if edited or not path:
        if edited:
            print(f"Re-solving from {start} to {end}")
        result = solve(grid, start, end)
        path = result.path
    print()

    if result.found:
        print(f"✅ Path exists! Length: {result.length} moves ({len(path)} cells)")
        print("Path:", " -> ".join(str(coord) for coord in path[:10]) + ("..." if len(path) > 10 else ""))
    else:
        print("❌ No path exists from start to end!")
        reachable = reachable_from(grid, start)
        free = grid.cell_count - grid.wall_count
        print(f"Reachable cells from start: {len(reachable)}")
        print(f"Total free cells: {free}")
        print(f"Cells reachable from end: {len(reachable_from(grid, end))}")

    if args.layers:
        print()
        visualize_layers(grid, start, end, path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
