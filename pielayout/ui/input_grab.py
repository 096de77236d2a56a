"""InputGrab — exclusive pointer and keyboard capture for the open menu."""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import QWidget

log = logging.getLogger(__name__)


class InputGrab:
    """Scoped mouse/keyboard grab on *widget*, released at most once.

    Only one widget in the process can hold a Qt grab at a time, so callers
    must not keep two menus open.  With no widget the grab only tracks its
    own state, which is what the headless tests use.
    """

    def __init__(self, widget: QWidget | None = None) -> None:
        self._widget = widget
        self._held = False
        self._released = False

    @property
    def held(self) -> bool:
        return self._held

    @property
    def released(self) -> bool:
        return self._released

    def acquire(self) -> None:
        if self._held or self._released:
            return
        if self._widget is not None:
            self._widget.grabMouse()
            self._widget.grabKeyboard()
        self._held = True
        log.debug("input grab acquired")

    def release(self) -> None:
        """Release the grab.  Calling this again is a no-op."""
        if not self._held:
            return
        if self._widget is not None:
            self._widget.releaseMouse()
            self._widget.releaseKeyboard()
        self._held = False
        self._released = True
        log.debug("input grab released")

    def __enter__(self) -> InputGrab:
        self.acquire()
        return self

    def __exit__(self, *exc: object) -> None:
        self.release()
