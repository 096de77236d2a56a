"""Integer point and rectangle arithmetic used by the menu and the resize preview.

Points double as offsets and sizes.  Every scaling operation floors its
result so that all coordinates stay on the integer pixel grid.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from PyQt6.QtCore import QPoint, QPointF, QRect


class Axis(Enum):
    X = "x"
    Y = "y"


@dataclass
class Point:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass
class Rect:
    """Axis-aligned box.  ``size`` may go negative while a drag is applied."""

    pos: Point
    size: Point

    def copy(self) -> Rect:
        return Rect(copy(self.pos), copy(self.size))

    def __str__(self) -> str:
        return f"{self.pos} {self.size.x}x{self.size.y}"


ZERO = Point(0, 0)


def copy(p: Point) -> Point:
    return Point(p.x, p.y)


def add(a: Point, b: Point) -> Point:
    return Point(a.x + b.x, a.y + b.y)


def subtract(a: Point, b: Point) -> Point:
    return Point(a.x - b.x, a.y - b.y)


def scale(factor: tuple[float, float], p: Point) -> Point:
    """Multiply *p* component-wise by the (x, y) *factor* and floor each result."""
    fx, fy = factor
    return Point(math.floor(p.x * fx), math.floor(p.y * fy))


def scale_constant(factor: float, p: Point) -> Point:
    return Point(math.floor(p.x * factor), math.floor(p.y * factor))


def scale_axis(axis: Axis, factor: float, p: Point) -> Point:
    """Scale only the *axis* component of *p*; the other one is copied."""
    ret = copy(p)
    setattr(ret, axis.value, math.floor(getattr(p, axis.value) * factor))
    return ret


def point_relative(absolute: Point, origin: Point | None) -> Point:
    """Convert absolute event coordinates to an offset from *origin*."""
    if origin is None:
        return copy(absolute)
    return subtract(absolute, origin)


def clip(bounds: Rect, r: Rect) -> Rect:
    """Constrain *r* to *bounds*.

    A rect already inside *bounds* (position not before it, size not larger)
    is returned as-is.  Otherwise the position is raised to at least
    ``bounds.pos`` and the size capped at ``bounds.size``, each component
    independently.  The far edge of the result is not checked, so a rect
    starting well inside *bounds* can still overhang it.
    """
    bpos, bsize = bounds.pos, bounds.size
    pos, size = r.pos, r.size
    if bpos.x <= pos.x and bpos.y <= pos.y and bsize.x >= size.x and bsize.y >= size.y:
        return r
    return Rect(
        pos=Point(max(bpos.x, pos.x), max(bpos.y, pos.y)),
        size=Point(min(bsize.x, size.x), min(bsize.y, size.y)),
    )


def translate(r: Rect, offset: Point) -> Rect:
    return Rect(add(r.pos, offset), copy(r.size))


# --- Qt conversions ---


def from_qpoint(p: QPoint | QPointF) -> Point:
    if isinstance(p, QPointF):
        return Point(math.floor(p.x()), math.floor(p.y()))
    return Point(p.x(), p.y())


def to_qpoint(p: Point) -> QPoint:
    return QPoint(p.x, p.y)


def from_qrect(r: QRect) -> Rect:
    return Rect(Point(r.x(), r.y()), Point(r.width(), r.height()))


def to_qrect(r: Rect) -> QRect:
    return QRect(r.pos.x, r.pos.y, r.size.x, r.size.y)
