"""Breadth-first search solver for 3D mazes."""

import logging
from collections import deque
from typing import Deque, Dict, Optional, Set

from .types import Coord, Grid, SolveResult, no_path
from .neighbors import get_neighbors
from .path import reconstruct_path

LOGGER = logging.getLogger(__name__)


class BFSSolver:
    """
    Breadth-first search over the 6-connected open cells of a grid.

    Every move costs the same, so the first time the end is dequeued the
    parent chain back to the start is a shortest path. Can be driven one
    step at a time (for cancellable workers) or run to completion.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Reset the solver state."""
        self.frontier: Deque[Coord] = deque()
        self.visited: Set[Coord] = set()
        self.parents: Dict[Coord, Coord] = {}
        self.start_coord: Optional[Coord] = None
        self.end_coord: Optional[Coord] = None
        self.nodes_explored = 0
        self._result: Optional[SolveResult] = None

    def initialize(self, start: Coord, end: Coord, grid: Grid):
        """
        Prepare a search from start to end.

        Raises OutOfBoundsError for endpoints outside the grid. A walled
        endpoint is not an error: the search is settled immediately as
        unreachable.
        """
        start_is_wall = grid.get(start)
        end_is_wall = grid.get(end)

        self.reset()
        self.start_coord = tuple(start)
        self.end_coord = tuple(end)

        if start_is_wall or end_is_wall:
            LOGGER.debug("Endpoint is a wall (start=%s end=%s); no path", start, end)
            self._result = no_path()
            return

        self.frontier.append(self.start_coord)
        self.visited.add(self.start_coord)

    def step(self, grid: Grid) -> Optional[SolveResult]:
        """
        Dequeue and expand one cell.
        Returns a SolveResult once the search is settled, None otherwise.
        """
        if self.start_coord is None or self.end_coord is None:
            raise RuntimeError("Solver not initialized")

        if self._result is not None:
            return self._result

        if not self.frontier:
            self._result = no_path(self.nodes_explored)
            return self._result

        current = self.frontier.popleft()
        self.nodes_explored += 1

        if current == self.end_coord:
            path = reconstruct_path(self.parents, self.start_coord, self.end_coord)
            self._result = SolveResult(path=path, found=True, nodes_explored=self.nodes_explored)
            return self._result

        for neighbor in get_neighbors(current, grid):
            if neighbor in self.visited:
                continue
            # Mark on enqueue so a cell is never queued twice
            self.visited.add(neighbor)
            self.parents[neighbor] = current
            self.frontier.append(neighbor)

        return None

    def run_complete(self, grid: Grid) -> SolveResult:
        """Run the search until it is settled."""
        while True:
            result = self.step(grid)
            if result is not None:
                return result

    def is_complete(self) -> bool:
        """Check if the search has settled (path found or exhausted)."""
        return self._result is not None


def solve(grid: Grid, start: Coord, end: Coord) -> SolveResult:
    """
    Find a shortest path from start to end.

    Args:
        grid: Grid to search in
        start: Starting coordinate
        end: End coordinate

    Returns:
        SolveResult with the path, or an empty path if end is unreachable
    """
    solver = BFSSolver()
    solver.initialize(start, end, grid)
    result = solver.run_complete(grid)
    LOGGER.debug(
        "Solved %s -> %s: found=%s length=%d explored=%d",
        start, end, result.found, result.length, result.nodes_explored,
    )
    return result
