"""MenuWindow — full-screen transparent cover that hosts one PieMenu.

The window swallows every pointer and keyboard event on the screen while the
menu is open and forwards them to the :class:`PieMenu` state machine.  The
pie and the layout preview are child widgets that follow the machine's
signals.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent, QKeyEvent, QMouseEvent
from PyQt6.QtWidgets import QWidget

from pielayout.config.constants import DRAG_SENSITIVITY, MENU_SIZE_DEFAULT
from pielayout.core.geometry import Point, Rect, from_qpoint, scale_constant, subtract, to_qrect
from pielayout.core.pie_menu import PieMenu
from pielayout.core.sector_mapper import MenuGeometry
from pielayout.core.selection import Location, Selection
from pielayout.ui.input_grab import InputGrab
from pielayout.ui.pie_widget import PieWidget
from pielayout.ui.preview_overlay import PreviewOverlay

log = logging.getLogger(__name__)


class MenuWindow(QWidget):
    """Cover pane for *screen* with the pie centred on *origin*.

    The menu itself is created by :meth:`popup`, once the window is visible
    and can take the input grab.
    """

    def __init__(
        self,
        screen: Rect,
        origin: Point,
        menu_size: int = MENU_SIZE_DEFAULT,
        sensitivity: float = DRAG_SENSITIVITY,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._screen = screen.copy()
        self._origin = origin
        self._menu_size = Point(menu_size, menu_size)
        self._sensitivity = sensitivity
        self._menu: PieMenu | None = None

        self.setWindowFlags(
            Qt.WindowType.FramelessWindowHint
            | Qt.WindowType.WindowStaysOnTopHint
            | Qt.WindowType.Tool
        )
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setGeometry(to_qrect(self._screen))

        # Preview sits underneath the pie
        self._preview = PreviewOverlay(self)
        self._pie = PieWidget(MenuGeometry.for_size(self._menu_size), self)
        pie_pos = subtract(subtract(origin, screen.pos), scale_constant(0.5, self._menu_size))
        self._pie.move(pie_pos.x, pie_pos.y)

    @property
    def menu(self) -> PieMenu | None:
        return self._menu

    @property
    def pie(self) -> PieWidget:
        return self._pie

    @property
    def preview(self) -> PreviewOverlay:
        return self._preview

    def popup(self, grab: InputGrab | None = None) -> PieMenu:
        """Show the cover, take the input grab and start the menu."""
        if self._menu is not None:
            return self._menu
        self.show()
        self.activateWindow()
        self.setFocus()
        menu = PieMenu(
            self._screen,
            self._origin,
            menu_size=self._menu_size,
            grab=grab if grab is not None else InputGrab(self),
            sensitivity=self._sensitivity,
            parent=self,
        )
        menu.selection_changed.connect(self._on_selection_changed)
        menu.preview_changed.connect(self._preview.show_rect)
        menu.tracking_started.connect(self._on_tracking_started)
        menu.closed.connect(self.close)
        self._menu = menu
        return menu

    # --- menu signals ---

    def _on_selection_changed(self, selection: Selection) -> None:
        self._pie.set_selection(selection)

    def _on_tracking_started(self, location: Location) -> None:
        log.debug("dragging %s edge, hiding pie", location.name)
        self._pie.hide()

    # --- Qt events ---

    def mouseMoveEvent(self, event: QMouseEvent | None) -> None:  # noqa: N802
        if event is not None and self._menu is not None:
            self._menu.mouse_move(from_qpoint(event.globalPosition()))
            event.accept()

    def mousePressEvent(self, event: QMouseEvent | None) -> None:  # noqa: N802
        if event is not None and self._menu is not None:
            self._menu.button_press()
            event.accept()

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None or self._menu is None:
            return
        if self._menu.key_press(event.key()):
            event.accept()
        else:
            super().keyPressEvent(event)

    def closeEvent(self, event: QCloseEvent | None) -> None:  # noqa: N802
        if self._menu is not None:
            self._menu.destroy()
        super().closeEvent(event)
