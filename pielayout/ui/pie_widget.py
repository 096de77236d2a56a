"""PieWidget — paints the two-ring menu and highlights the selected sector."""

from __future__ import annotations

import math

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QPainter, QPainterPath, QPaintEvent, QPen, QTransform
from PyQt6.QtWidgets import QWidget

from pielayout.config.constants import (
    MENU_ACTIVE_COLOR,
    MENU_BACKGROUND_ALPHA,
    MENU_BACKGROUND_LUMINANCE,
    MENU_DARK_COLOR,
    MENU_LIGHT_COLOR,
)
from pielayout.core.sector_mapper import MenuGeometry, active_indicators
from pielayout.core.selection import UNSELECTED, InnerSelection, Location, Ring, Selection

ANGLE_HALF = math.pi
ANGLE_QUARTER = ANGLE_HALF / 2
ANGLE_EIGHTH = ANGLE_QUARTER / 2
ANGLE_SIXTEENTH = ANGLE_EIGHTH / 2

# Centre angle of each edge sector (radians, clockwise from +x, y down)
_EDGE_ANGLES: dict[Location, float] = {
    Location.RIGHT: 0.0,
    Location.LEFT: ANGLE_HALF,
    Location.BOTTOM: ANGLE_QUARTER,
    Location.TOP: -ANGLE_QUARTER,
}

# Unit direction of each corner shade from the centre
_CORNER_DIRECTIONS: dict[Location, tuple[int, int]] = {
    Location.BOTTOMRIGHT: (1, 1),
    Location.BOTTOMLEFT: (-1, 1),
    Location.TOPLEFT: (-1, -1),
    Location.TOPRIGHT: (1, -1),
}


def _rgba(color: tuple[int, int, int, int]) -> QColor:
    return QColor(*color)


def _arc(radius: float, start: float, end: float) -> QPainterPath:
    """Open arc around the origin from *start* to *end* (radians, clockwise)."""
    rect = QRectF(-radius, -radius, radius * 2, radius * 2)
    path = QPainterPath()
    # Qt measures degrees counter-clockwise
    path.arcMoveTo(rect, -math.degrees(start))
    path.arcTo(rect, -math.degrees(start), -math.degrees(end - start))
    return path


def _gap_strip(length: float, width: float, angle: float) -> QPainterPath:
    """Thin bar through the origin, rotated by *angle*, separating sectors."""
    path = QPainterPath()
    path.addRect(QRectF(-length / 2, -width / 2, length, width))
    return QTransform().rotateRadians(angle).map(path)


class PieWidget(QWidget):
    """Draws the menu for a :class:`MenuGeometry`.

    Rendering only depends on the current selection; call
    :meth:`set_selection` whenever it changes.
    """

    def __init__(self, geometry: MenuGeometry, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._geometry = geometry
        self._selection: Selection = UNSELECTED
        self._active: set[tuple[Ring, int]] = set()
        self.setFixedSize(geometry.size.x, geometry.size.y)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def active_sectors(self) -> set[tuple[Ring, int]]:
        return set(self._active)

    def set_selection(self, selection: Selection) -> None:
        self._selection = selection
        self._active = active_indicators(selection)
        self.update()

    def _sector_color(self, ring: Ring, index: int) -> QColor:
        if (ring, index) in self._active:
            return _rgba(MENU_ACTIVE_COLOR)
        return _rgba(MENU_DARK_COLOR)

    # --- painting ---

    def paintEvent(self, event: QPaintEvent | None) -> None:  # noqa: N802
        g = self._geometry
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
        painter.fillRect(self.rect(), Qt.GlobalColor.transparent)
        painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_SourceOver)

        # Everything from here on is drawn around the centre
        painter.translate(g.half.x, g.half.y)
        self._paint_backing(painter)

        # Gaps between outer sectors: four bars through the centre
        full = QPainterPath()
        full.addRect(QRectF(-g.half.x, -g.half.y, g.size.x, g.size.y))
        outer_clip = QPainterPath(full)
        for i in range(4):
            angle = ANGLE_SIXTEENTH + i * ANGLE_EIGHTH
            outer_clip = outer_clip.subtracted(_gap_strip(g.size.x, g.gap_width, angle))
        painter.setClipPath(outer_clip)
        self._paint_outer(painter)

        # Inner ring only has the horizontal gap
        painter.setClipPath(full.subtracted(_gap_strip(g.size.x, g.gap_width, 0.0)))
        self._paint_inner(painter)
        painter.end()

    def _paint_backing(self, painter: QPainter) -> None:
        g = self._geometry
        lum = round(MENU_BACKGROUND_LUMINANCE * 255)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(QColor(lum, lum, lum, round(MENU_BACKGROUND_ALPHA * 255))))
        radius = g.outer_radius + g.border_width
        painter.drawEllipse(QPointF(0, 0), radius, radius)

    def _paint_outer(self, painter: QPainter) -> None:
        g = self._geometry
        # Base fill of the outer ring
        ring_radius = g.outer_radius - (g.outer_radius - g.mid_radius) / 2
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.setPen(QPen(_rgba(MENU_LIGHT_COLOR), g.outer_radius - g.mid_radius - g.gap_width / 2))
        painter.drawEllipse(QPointF(0, 0), ring_radius, ring_radius)

        disc = QPainterPath()
        disc.addEllipse(QPointF(0, 0), g.outer_radius, g.outer_radius)
        painter.setClipPath(disc, Qt.ClipOperation.IntersectClip)

        # Edge sectors
        edge_radius = g.outer_radius - g.edge_width / 2
        for loc, centre in _EDGE_ANGLES.items():
            pen = QPen(self._sector_color(Ring.OUTER, loc), g.edge_width)
            pen.setCapStyle(Qt.PenCapStyle.FlatCap)
            painter.strokePath(_arc(edge_radius, centre - ANGLE_SIXTEENTH, centre + ANGLE_SIXTEENTH), pen)

        # Corner shades
        painter.setPen(Qt.PenStyle.NoPen)
        for loc, (dx, dy) in _CORNER_DIRECTIONS.items():
            painter.setBrush(QBrush(self._sector_color(Ring.OUTER, loc)))
            centre = QPointF(dx * g.corner_distance, dy * g.corner_distance)
            painter.drawEllipse(centre, g.corner_width, g.corner_width)

    def _paint_inner(self, painter: QPainter) -> None:
        g = self._geometry
        width = g.mid_radius - g.inner_radius - g.half_gap_width
        radius = g.mid_radius - (g.mid_radius - g.inner_radius) / 2 - g.half_gap_width

        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.setPen(QPen(_rgba(MENU_LIGHT_COLOR), width))
        painter.drawEllipse(QPointF(0, 0), radius, radius)

        halves = (
            (InnerSelection.MAXIMIZE, ANGLE_HALF, 2 * ANGLE_HALF),
            (InnerSelection.MINIMIZE, 0.0, ANGLE_HALF),
        )
        for inner, start, end in halves:
            pen = QPen(self._sector_color(Ring.INNER, inner), width)
            pen.setCapStyle(Qt.PenCapStyle.FlatCap)
            painter.strokePath(_arc(radius, start, end), pen)
