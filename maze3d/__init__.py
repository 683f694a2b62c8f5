"""3D Maze Solver - procedural 3D maze generation with breadth-first solving.

This package generates dense 3D occupancy grids that are guaranteed to be
solvable, finds shortest 6-connected paths through them, and ships a small
PySide6 viewer that renders each z-layer of the maze with its solution.
"""

__version__ = "1.0.0"
__author__ = "3D Maze Solver"
