"""Persistent application settings backed by QSettings."""

from __future__ import annotations

from PyQt6.QtCore import QSettings

from pielayout.config.constants import (
    APP_NAME,
    DRAG_SENSITIVITY,
    MENU_SIZE_DEFAULT,
    MENU_SIZE_MAX,
    MENU_SIZE_MIN,
    ORG_NAME,
)


class AppSettings:
    """Thin wrapper around QSettings for typed access to menu preferences."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings(ORG_NAME, APP_NAME)

    # --- menu ---

    def menu_size(self) -> int:
        val = self._qs.value("menu/size", MENU_SIZE_DEFAULT)
        try:
            size = int(val)
        except (TypeError, ValueError):
            return MENU_SIZE_DEFAULT
        return max(MENU_SIZE_MIN, min(MENU_SIZE_MAX, size))

    def set_menu_size(self, size: int) -> None:
        self._qs.setValue("menu/size", size)

    def drag_sensitivity(self) -> float:
        val = self._qs.value("menu/dragSensitivity", DRAG_SENSITIVITY)
        try:
            sensitivity = float(val)
        except (TypeError, ValueError):
            return DRAG_SENSITIVITY
        if sensitivity <= 0:
            return DRAG_SENSITIVITY
        return sensitivity

    def set_drag_sensitivity(self, sensitivity: float) -> None:
        self._qs.setValue("menu/dragSensitivity", sensitivity)

    def sync(self) -> None:
        self._qs.sync()
