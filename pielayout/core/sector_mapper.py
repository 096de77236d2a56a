"""SectorMapper — pointer offset from the menu centre to a ring/sector selection."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pielayout.config.constants import (
    BORDER_RATIO,
    CORNER_DISTANCE_RATIO,
    CORNER_WIDTH_RATIO,
    EDGE_RATIO,
    GAP_RATIO,
    INNER_RADIUS_RATIO,
    MID_RADIUS_RATIO,
)
from pielayout.core.geometry import Point, scale_constant
from pielayout.core.selection import UNSELECTED, Ring, Selection

INNER_SECTIONS = 2
OUTER_SECTIONS = 8

# Rotates the outer partition by pi/16 so that no boundary
# falls on a cardinal or diagonal direction.
OUTER_OFFSET = math.pi / 16


@dataclass(frozen=True)
class MenuGeometry:
    """Radii and stroke widths of a menu, computed once from its size.

    Shared by the mapper (hit testing) and the pie widget (drawing) so both
    always agree on where the rings are.
    """

    size: Point
    half: Point
    border_width: int
    outer_radius: int
    mid_radius: int
    inner_radius: int
    gap_width: int
    half_gap_width: int
    edge_width: int
    corner_width: int
    corner_distance: int

    @classmethod
    def for_size(cls, menu_size: Point) -> MenuGeometry:
        border = math.floor(menu_size.x * BORDER_RATIO)
        outer = menu_size.x // 2 - border
        gap = math.floor(outer * GAP_RATIO)
        return cls(
            size=Point(menu_size.x, menu_size.y),
            half=scale_constant(0.5, menu_size),
            border_width=border,
            outer_radius=outer,
            mid_radius=math.floor(outer * MID_RADIUS_RATIO),
            inner_radius=math.floor(outer * INNER_RADIUS_RATIO),
            gap_width=gap,
            half_gap_width=gap // 2,
            edge_width=math.floor(outer * EDGE_RATIO),
            corner_width=math.floor(outer * CORNER_WIDTH_RATIO),
            corner_distance=math.floor(outer * CORNER_DISTANCE_RATIO),
        )


def circular_index(angle: float, sections: int, offset: float = 0.0) -> int:
    """Map *angle* in (-pi, pi] onto one of *sections* equal arcs.

    Arc 0 starts at ``-pi - offset``, i.e. pointing left, and indices grow
    with the angle.
    """
    span = 2 * math.pi / sections
    return math.floor((angle + math.pi + offset) / span) % sections


def select_at(point: Point, geometry: MenuGeometry) -> Selection:
    """Return the selection under *point*, given relative to the menu centre."""
    radius = math.hypot(point.x, point.y)
    angle = math.atan2(point.y, point.x)

    if radius <= geometry.inner_radius:
        return UNSELECTED
    if radius < geometry.mid_radius:
        return Selection(Ring.INNER, circular_index(angle, INNER_SECTIONS))
    return Selection(Ring.OUTER, circular_index(angle, OUTER_SECTIONS, OUTER_OFFSET))


def active_indicators(selection: Selection) -> set[tuple[Ring, int]]:
    """Sectors that should render highlighted for *selection*."""
    if selection.ring == Ring.NONE:
        return set()
    return {(selection.ring, selection.index)}
