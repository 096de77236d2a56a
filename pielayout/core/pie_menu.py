"""PieMenu — select, optionally drag-resize, then commit or cancel.

The menu starts OPEN: pointer movement picks a ring/sector.  Pressing the
track key over an outer sector switches to TRACKING, where pointer movement
drags the edge of the sector's layout rectangle instead.  A click commits and
the cancel key aborts; both end in COMPLETED, which is terminal.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum, auto
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, pyqtSignal

from pielayout.config.constants import DRAG_SENSITIVITY, MENU_SIZE_DEFAULT
from pielayout.config.shortcuts import MENU_KEYS
from pielayout.core.geometry import ZERO, Point, Rect, copy, point_relative, translate
from pielayout.core.resize_transform import apply_diff, base_rect
from pielayout.core.sector_mapper import MenuGeometry, select_at
from pielayout.core.selection import (
    MINIMIZE_SELECTION,
    UNSELECTED,
    Location,
    Ring,
    Selection,
    eq,
    oppose,
)

if TYPE_CHECKING:
    from pielayout.ui.input_grab import InputGrab

log = logging.getLogger(__name__)


class MenuState(Enum):
    OPEN = auto()
    TRACKING = auto()
    COMPLETED = auto()


class Action(Enum):
    CANCEL = auto()
    MINIMIZE = auto()
    RESIZE = auto()


class PieMenu(QObject):
    """State machine behind one open menu.

    All rectangles (previews and the RESIZE result) are relative to
    ``screen.pos``; use :meth:`to_screen` for absolute coordinates.

    Signals
    -------
    selection_changed(Selection)
        Emitted when the pointer crosses into a different sector.
    preview_changed(object)
        Emitted with a copy of the candidate rectangle, or ``None`` when the
        selection has no rectangle.
    tracking_started(Location)
        Emitted with the dragged edge/corner when drag-resize begins.
    completed(Action, object)
        Emitted at most once, with the chosen action and its rectangle
        (``None`` unless the action is RESIZE).
    closed()
        Emitted once when the menu finishes, with or without an action.
    """

    selection_changed = pyqtSignal(object)
    preview_changed = pyqtSignal(object)
    tracking_started = pyqtSignal(object)
    completed = pyqtSignal(object, object)
    closed = pyqtSignal()

    def __init__(
        self,
        screen: Rect,
        origin: Point,
        *,
        menu_size: Point | None = None,
        grab: InputGrab | None = None,
        on_select: Callable[[Action, Rect | None], None] | None = None,
        sensitivity: float = DRAG_SENSITIVITY,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        if menu_size is None:
            menu_size = Point(MENU_SIZE_DEFAULT, MENU_SIZE_DEFAULT)
        log.debug("creating menu at %s with bounds %s", origin, screen)
        self._geometry = MenuGeometry.for_size(menu_size)
        self._screen = screen.copy()
        self._origin = copy(origin)
        self._pointer = copy(origin)
        self._sensitivity = sensitivity
        self._state = MenuState.OPEN

        self._selection: Selection = UNSELECTED
        self._base: Rect | None = None
        self._preview: Rect | None = None

        self._anchor: Location | None = None
        self._tracking_origin: Point | None = None
        self._bounds = Rect(copy(ZERO), copy(screen.size))

        if on_select is not None:
            self.completed.connect(on_select)

        self._grab = grab
        if self._grab is not None:
            self._grab.acquire()

    # --- queries ---

    @property
    def state(self) -> MenuState:
        return self._state

    @property
    def geometry(self) -> MenuGeometry:
        return self._geometry

    @property
    def screen(self) -> Rect:
        return self._screen.copy()

    @property
    def origin(self) -> Point:
        return copy(self._origin)

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def preview_rect(self) -> Rect | None:
        """Copy of the candidate rectangle, if the selection has one."""
        if self._preview is None:
            return None
        return self._preview.copy()

    @property
    def tracking_location(self) -> Location | None:
        """Edge/corner being dragged while TRACKING, else ``None``."""
        return self._anchor

    @property
    def is_finished(self) -> bool:
        return self._state == MenuState.COMPLETED

    def to_screen(self, rect: Rect) -> Rect:
        """Translate a menu-relative *rect* into absolute screen coordinates."""
        return translate(rect, self._screen.pos)

    # --- event handlers (return True if consumed) ---

    def mouse_move(self, pos: Point) -> bool:
        """Handle the pointer moving to absolute position *pos*."""
        if self._state == MenuState.OPEN:
            self._pointer = copy(pos)
            self._update_selection(select_at(point_relative(pos, self._origin), self._geometry))
            return True
        if self._state == MenuState.TRACKING:
            self._pointer = copy(pos)
            self._drag_to(pos)
            return True
        return False

    def key_press(self, key: int) -> bool:
        if self._state == MenuState.COMPLETED:
            return False
        if key == MENU_KEYS["menu.cancel"]:
            self.cancel()
            return True
        if key == MENU_KEYS["menu.track"]:
            if not self.start_tracking():
                log.debug("preview not tracking mouse (selection %s)", self._selection)
            return True
        return False

    def button_press(self) -> bool:
        if self._state == MenuState.COMPLETED:
            return False
        self.commit()
        return True

    # --- transitions ---

    def start_tracking(self) -> bool:
        """Begin drag-resizing the selected outer sector's rectangle.

        Returns ``False``, leaving the menu untouched, unless the menu is
        OPEN with an outer sector selected.
        """
        if self._state != MenuState.OPEN:
            return False
        if self._selection.ring != Ring.OUTER or self._base is None:
            return False
        self._anchor = oppose(Location(self._selection.index))
        self._tracking_origin = copy(self._pointer)
        self._state = MenuState.TRACKING
        log.debug("preview: tracking corner %s from %s", self._anchor.name, self._tracking_origin)
        self.tracking_started.emit(self._anchor)
        return True

    def commit(self) -> None:
        """Finish with the action implied by the current selection/preview."""
        if self._state == MenuState.COMPLETED:
            return
        if eq(self._selection, MINIMIZE_SELECTION):
            self._finish(Action.MINIMIZE, None)
        elif self._preview is not None:
            self._finish(Action.RESIZE, self._preview.copy())
        else:
            log.debug("commit with nothing selected, closing")
            self._finish(None, None)

    def cancel(self) -> None:
        if self._state == MenuState.COMPLETED:
            return
        self._finish(Action.CANCEL, None)

    def destroy(self) -> None:
        """Close without reporting an action.  No-op once finished."""
        if self._state == MenuState.COMPLETED:
            return
        self._finish(None, None)

    # --- internal ---

    def _update_selection(self, selection: Selection) -> None:
        if eq(self._selection, selection):
            return
        log.debug("updateSelection(%s)", selection)
        self._selection = selection
        self._base = base_rect(selection, self._screen.size)
        self._preview = None if self._base is None else self._base.copy()
        self.selection_changed.emit(selection)
        self.preview_changed.emit(self.preview_rect)

    def _drag_to(self, pos: Point) -> None:
        if self._anchor is None or self._tracking_origin is None or self._base is None:
            return
        diff = point_relative(pos, self._tracking_origin)
        self._preview = apply_diff(self._anchor, diff, self._base, self._bounds, self._sensitivity)
        log.debug(
            "move diff %s (from origin %s) turned base %s into rect %s",
            diff,
            self._tracking_origin,
            self._base,
            self._preview,
        )
        self.preview_changed.emit(self.preview_rect)

    def _finish(self, action: Action | None, rect: Rect | None) -> None:
        self._state = MenuState.COMPLETED
        if self._grab is not None:
            self._grab.release()
        if action is not None:
            log.debug("menu completed with %s %s", action.name, rect)
            self.completed.emit(action, rect)
        self.closed.emit()
