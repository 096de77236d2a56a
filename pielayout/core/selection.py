"""Ring/sector identifiers for the pie menu."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Ring(IntEnum):
    NONE = 0
    INNER = 1
    OUTER = 2


class Location(IntEnum):
    """Outer-ring sectors, clockwise from the left in screen coordinates.

    Each value is also the edge or corner handle a drag-resize grabs.
    """

    LEFT = 0
    TOPLEFT = 1
    TOP = 2
    TOPRIGHT = 3
    RIGHT = 4
    BOTTOMRIGHT = 5
    BOTTOM = 6
    BOTTOMLEFT = 7


class InnerSelection(IntEnum):
    MAXIMIZE = 0
    MINIMIZE = 1


def oppose(loc: Location) -> Location:
    """Return the location diametrically across the ring from *loc*."""
    return Location((loc + 4) % len(Location))


@dataclass(frozen=True)
class Selection:
    ring: Ring
    index: int

    def is_at(self, ring: Ring, index: int) -> bool:
        return self.ring == ring and self.index == index

    def __str__(self) -> str:
        if self.ring == Ring.OUTER:
            return f"OUTER:{Location(self.index).name}"
        if self.ring == Ring.INNER:
            return f"INNER:{InnerSelection(self.index).name}"
        return "NONE"


def eq(a: Selection, b: Selection) -> bool:
    return a.ring == b.ring and a.index == b.index


UNSELECTED = Selection(Ring.NONE, 0)
MINIMIZE_SELECTION = Selection(Ring.INNER, InnerSelection.MINIMIZE)
