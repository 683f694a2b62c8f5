"""Graphics items for drawing maze layers."""

from PySide6.QtWidgets import QGraphicsEllipseItem, QGraphicsRectItem
from PySide6.QtGui import QBrush, QColor, QPen
from PySide6.QtCore import Qt

from ..domain.types import Coord


def wall_color(coord: Coord) -> QColor:
    """Blue-ish wall shade that varies slightly per cell."""
    x, y, z = coord
    hue = 0.6 + ((x * 13 + y * 17 + z * 19) % 10) / 100
    return QColor.fromHslF(hue, 0.7, 0.5)


class WallTile(QGraphicsRectItem):
    """Graphics item representing a single wall cell."""

    def __init__(self, coord: Coord, left: float, top: float, size: float):
        super().__init__(0, 0, size, size)
        self.coord = coord
        self.setPos(left, top)
        self.setBrush(QBrush(wall_color(coord)))
        self.setPen(QPen(Qt.black, 0.5))
        self.setToolTip(f"Wall {coord}")


class EndpointMarker(QGraphicsEllipseItem):
    """Round marker for the start or end cell."""

    COLORS = {
        "start": QColor(0, 255, 0),     # Green
        "end": QColor(255, 0, 0),       # Red
    }

    def __init__(self, kind: str, coord: Coord, center_x: float, center_y: float, size: float):
        radius = size / 2
        super().__init__(-radius, -radius, size, size)
        self.kind = kind
        self.coord = coord
        self.setPos(center_x, center_y)
        self.setBrush(QBrush(self.COLORS[kind]))
        self.setPen(QPen(Qt.black, 1))
        self.setZValue(3)
        self.setToolTip(f"{kind.capitalize()} {coord}")


class LayerStepMarker(QGraphicsEllipseItem):
    """Small dot marking where the path moves between z-layers."""

    COLOR = QColor(255, 165, 0)  # Orange

    def __init__(self, center_x: float, center_y: float, size: float):
        radius = size / 2
        super().__init__(-radius, -radius, size, size)
        self.setPos(center_x, center_y)
        self.setBrush(QBrush(self.COLOR))
        self.setPen(QPen(Qt.NoPen))
        self.setZValue(2)
