"""Layout rectangles for a selected sector, and drag-resizing them."""

from __future__ import annotations

from pielayout.config.constants import DRAG_SENSITIVITY
from pielayout.core.geometry import ZERO, Point, Rect, clip, copy, scale, scale_constant
from pielayout.core.selection import InnerSelection, Location, Ring, Selection

_HALF_WIDTH = (0.5, 1.0)
_HALF_HEIGHT = (1.0, 0.5)
_RIGHT_HALF = (0.5, 0.0)
_BOTTOM_HALF = (0.0, 0.5)

# Sign of the (pos.x, pos.y, size.x, size.y) change per unit of drag for the
# handle at each location.  Corners combine their two edges.
_EDGE_RULES: dict[Location, tuple[int, int, int, int]] = {
    Location.LEFT: (1, 0, -1, 0),
    Location.RIGHT: (0, 0, 1, 0),
    Location.TOP: (0, 1, 0, -1),
    Location.BOTTOM: (0, 0, 0, 1),
    Location.TOPLEFT: (1, 1, -1, -1),
    Location.TOPRIGHT: (0, 1, 1, -1),
    Location.BOTTOMRIGHT: (0, 0, 1, 1),
    Location.BOTTOMLEFT: (1, 0, -1, 1),
}


class UnknownLocationError(ValueError):
    """Raised when a value that is not a :class:`Location` reaches the transform."""

    def __init__(self, location: object) -> None:
        super().__init__(f"unknown location: {location!r}")
        self.location = location


def _as_location(location: object) -> Location:
    try:
        return Location(location)  # type: ignore[arg-type]
    except ValueError:
        raise UnknownLocationError(location) from None


def select_outer(location: Location, screen_size: Point) -> Rect:
    """Half or quarter of the screen that the outer sector *location* stands for."""
    half = scale_constant(0.5, screen_size)
    loc = _as_location(location)
    if loc == Location.LEFT:
        return Rect(copy(ZERO), scale(_HALF_WIDTH, screen_size))
    if loc == Location.TOPLEFT:
        return Rect(copy(ZERO), half)
    if loc == Location.TOP:
        return Rect(copy(ZERO), scale(_HALF_HEIGHT, screen_size))
    if loc == Location.TOPRIGHT:
        return Rect(scale(_RIGHT_HALF, screen_size), half)
    if loc == Location.RIGHT:
        return Rect(scale(_RIGHT_HALF, screen_size), scale(_HALF_WIDTH, screen_size))
    if loc == Location.BOTTOMRIGHT:
        return Rect(copy(half), half)
    if loc == Location.BOTTOM:
        return Rect(scale(_BOTTOM_HALF, screen_size), scale(_HALF_HEIGHT, screen_size))
    return Rect(scale(_BOTTOM_HALF, screen_size), half)


def select_inner(inner: InnerSelection, screen_size: Point) -> Rect | None:
    """Full screen for MAXIMIZE; MINIMIZE has no rectangle."""
    if inner == InnerSelection.MAXIMIZE:
        return Rect(copy(ZERO), copy(screen_size))
    return None


def base_rect(selection: Selection, screen_size: Point) -> Rect | None:
    """Starting rectangle for *selection*, or ``None`` if it does not resize."""
    if selection.ring == Ring.OUTER:
        return select_outer(Location(selection.index), screen_size)
    if selection.ring == Ring.INNER:
        return select_inner(InnerSelection(selection.index), screen_size)
    return None


def apply_diff(
    location: Location,
    diff: Point,
    base: Rect,
    bounds: Rect,
    sensitivity: float = DRAG_SENSITIVITY,
) -> Rect:
    """Move the *location* edge/corner of *base* by the pointer movement *diff*.

    The movement is amplified by *sensitivity*.  The result is clipped to
    *bounds*; *base* itself is left untouched.
    """
    rule = _EDGE_RULES.get(location)
    if rule is None:
        raise UnknownLocationError(location)
    pos_x, pos_y, size_x, size_y = rule

    scaled = scale_constant(sensitivity, diff)
    ret = base.copy()
    ret.pos.x += pos_x * scaled.x
    ret.pos.y += pos_y * scaled.y
    ret.size.x += size_x * scaled.x
    ret.size.y += size_y * scaled.y
    return clip(bounds, ret)
