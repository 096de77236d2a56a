"""PreviewOverlay — translucent rectangle showing where the window will go."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QPainter, QPaintEvent
from PyQt6.QtWidgets import QWidget

from pielayout.config.constants import PREVIEW_COLOR
from pielayout.core.geometry import Rect, from_qrect, to_qrect


class PreviewOverlay(QWidget):
    """Highlight placed in parent coordinates; hidden while there is no rect."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._color = QColor(*PREVIEW_COLOR)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        self.hide()

    @property
    def preview_rect(self) -> Rect | None:
        if self.isHidden():
            return None
        return from_qrect(self.geometry())

    def show_rect(self, rect: Rect | None) -> None:
        if rect is None:
            self.hide()
            return
        self.setGeometry(to_qrect(rect))
        self.show()

    def paintEvent(self, event: QPaintEvent | None) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._color)
        painter.end()
