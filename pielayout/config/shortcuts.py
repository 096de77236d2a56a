"""Keyboard bindings for the open menu.

Each entry maps a logical menu action to the ``Qt.Key`` that triggers it.
Keys not listed here are ignored while the menu is open.
"""

from PyQt6.QtCore import Qt

MENU_KEYS: dict[str, Qt.Key] = {
    # Close the menu without doing anything
    "menu.cancel": Qt.Key.Key_Escape,
    # Grab the opposite edge of the selected sector and drag-resize
    "menu.track": Qt.Key.Key_Shift,
}
