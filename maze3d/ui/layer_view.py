"""Layer view: draws every z-layer of the maze side by side."""

from typing import Optional, Tuple

from PySide6.QtWidgets import QGraphicsScene, QGraphicsSimpleTextItem, QGraphicsView
from PySide6.QtGui import QBrush, QColor, QPainter, QPen
from PySide6.QtCore import Qt

from ..domain.types import Coord
from ..domain.path import get_path_segments
from ..app.controller import MazeController, MazeSnapshot
from .tiles import EndpointMarker, LayerStepMarker, WallTile


class LayerView(QGraphicsView):
    """
    Graphics view rendering a MazeSnapshot.

    Each z-layer is an x/y slice laid out left to right. Moves within a
    layer are drawn as line segments; moves between layers are drawn as a
    marker on both layers. Nothing here writes back to the controller.
    """

    PATH_COLOR = QColor(255, 215, 0)  # Gold
    GRID_COLOR = QColor(70, 70, 70)

    def __init__(self, controller: MazeController):
        super().__init__()

        self.controller = controller
        self.scene = QGraphicsScene()
        self.setScene(self.scene)
        self.setBackgroundBrush(QBrush(Qt.black))

        # Settings
        self.tile_size = 20.0
        self.layer_gap = 2.0  # in tiles
        self.show_only_solution = False
        self.show_grid = True

        self._snapshot: Optional[MazeSnapshot] = None

        self.setRenderHint(QPainter.Antialiasing)
        self.setDragMode(QGraphicsView.ScrollHandDrag)

        self.controller.snapshot_changed.connect(self.update_snapshot)
        self.update_snapshot(self.controller.snapshot())

    def update_snapshot(self, snapshot: MazeSnapshot):
        """Redraw from a new snapshot."""
        self._snapshot = snapshot
        self.redraw()

    def set_show_only_solution(self, show: bool):
        self.show_only_solution = show
        self.redraw()

    def set_show_grid(self, show: bool):
        self.show_grid = show
        self.redraw()

    def cell_origin(self, coord: Coord) -> Tuple[float, float]:
        """Top-left scene position of a cell."""
        x, y, z = coord
        width = self._snapshot.dimensions[0]
        layer_offset = z * (width + self.layer_gap) * self.tile_size
        return (layer_offset + x * self.tile_size, y * self.tile_size)

    def cell_center(self, coord: Coord) -> Tuple[float, float]:
        left, top = self.cell_origin(coord)
        return (left + self.tile_size / 2, top + self.tile_size / 2)

    def redraw(self):
        self.scene.clear()
        snapshot = self._snapshot
        if snapshot is None:
            return

        width, height, depth = snapshot.dimensions
        layer_width = (width + self.layer_gap) * self.tile_size
        self.scene.setSceneRect(
            0, -self.tile_size * 1.5, depth * layer_width, (height + 1.5) * self.tile_size
        )

        for z in range(depth):
            self._draw_layer_frame(z, width, height)

        if snapshot.grid is not None and not self.show_only_solution:
            for coord in snapshot.grid.iter_walls():
                left, top = self.cell_origin(coord)
                self.scene.addItem(WallTile(coord, left, top, self.tile_size))

        if snapshot.path:
            self._draw_path(snapshot.path)

        marker_size = self.tile_size * 0.8
        for kind, coord in (("start", snapshot.start), ("end", snapshot.end)):
            center_x, center_y = self.cell_center(coord)
            self.scene.addItem(EndpointMarker(kind, coord, center_x, center_y, marker_size))

    def _draw_layer_frame(self, z: int, width: int, height: int):
        left, top = self.cell_origin((0, 0, z))
        label = QGraphicsSimpleTextItem(f"z = {z}")
        label.setBrush(QBrush(Qt.white))
        label.setPos(left, top - self.tile_size * 1.3)
        self.scene.addItem(label)

        pen = QPen(self.GRID_COLOR, 0.5)
        if self.show_grid:
            for i in range(width + 1):
                x = left + i * self.tile_size
                self.scene.addLine(x, top, x, top + height * self.tile_size, pen)
            for j in range(height + 1):
                y = top + j * self.tile_size
                self.scene.addLine(left, y, left + width * self.tile_size, y, pen)
        else:
            self.scene.addRect(left, top, width * self.tile_size, height * self.tile_size, pen)

    def _draw_path(self, path):
        pen = QPen(self.PATH_COLOR, self.tile_size * 0.2)
        pen.setCapStyle(Qt.RoundCap)
        for a, b in get_path_segments(list(path)):
            if a[2] == b[2]:
                line = self.scene.addLine(*self.cell_center(a), *self.cell_center(b), pen)
                line.setZValue(1)
            else:
                for coord in (a, b):
                    center_x, center_y = self.cell_center(coord)
                    self.scene.addItem(LayerStepMarker(center_x, center_y, self.tile_size * 0.45))

    def wheelEvent(self, event):
        """Handle mouse wheel for zooming."""
        zoom_factor = 1.15
        if event.angleDelta().y() > 0:
            self.scale(zoom_factor, zoom_factor)
        else:
            self.scale(1 / zoom_factor, 1 / zoom_factor)

    def fit_in_view(self):
        """Fit every layer in the view."""
        if self.scene.items():
            self.fitInView(self.scene.sceneRect(), Qt.KeepAspectRatio)

    def reset_zoom(self):
        """Reset zoom to 1:1."""
        self.resetTransform()
