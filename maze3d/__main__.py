"""Main entry point for the 3D Maze Solver."""

import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication

from .domain.types import DEFAULT_DIMENSIONS, DEFAULT_MAX_DIMENSION, MazeConfig, MazeError

LOGGER = logging.getLogger("maze3d")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="3D maze generator and BFS solver")
    parser.add_argument("--size", type=int, nargs=3, metavar=("X", "Y", "Z"),
                        default=list(DEFAULT_DIMENSIONS), help="Maze dimensions")
    parser.add_argument("--max-dimension", type=int, default=DEFAULT_MAX_DIMENSION,
                        help="Upper bound for each dimension (10-100)")
    parser.add_argument("--seed", type=int, help="Seed for reproducible mazes")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the application."""
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s")

    x, y, z = args.size
    config = MazeConfig(x=x, y=y, z=z, max_dimension=args.max_dimension, seed=args.seed)
    try:
        config.validate()
    except MazeError as e:
        LOGGER.error("Invalid configuration: %s", e)
        return 2

    app = QApplication(sys.argv[:1])
    app.setApplicationName("3D Maze Solver")
    app.setApplicationVersion("1.0.0")

    # Import UI components (after QApplication is created)
    from .ui.main_window import MainWindow
    from .app.controller import MazeController

    controller = MazeController(config)
    window = MainWindow(controller)
    window.show()
    try:
        return app.exec()
    finally:
        controller.shutdown()


if __name__ == "__main__":
    sys.exit(main())
