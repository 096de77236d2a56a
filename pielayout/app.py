"""QApplication bootstrap: open the menu under the cursor and report the choice."""

from __future__ import annotations

import argparse
import logging
import sys

from PyQt6.QtGui import QCursor, QGuiApplication
from PyQt6.QtWidgets import QApplication

from pielayout.config.constants import APP_NAME, APP_VERSION, ORG_DOMAIN, ORG_NAME
from pielayout.config.settings import AppSettings
from pielayout.core.geometry import Rect, from_qpoint, from_qrect
from pielayout.core.pie_menu import Action
from pielayout.ui.menu_window import MenuWindow

log = logging.getLogger(__name__)


def format_result(action: Action, rect: Rect | None) -> str:
    """One-line report of the chosen action, e.g. ``RESIZE 0 0 960 1080``."""
    if action == Action.RESIZE and rect is not None:
        return f"{action.name} {rect.pos.x} {rect.pos.y} {rect.size.x} {rect.size.y}"
    return action.name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pielayout",
        description="Pick a window layout from a pie menu opened at the cursor.",
    )
    parser.add_argument("--size", type=int, default=None, help="menu diameter in pixels")
    parser.add_argument(
        "--sensitivity",
        type=float,
        default=None,
        help="screen pixels moved per pointer pixel while drag-resizing",
    )
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser


def main() -> None:
    """Launch the application."""
    args = build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(ORG_NAME)
    app.setOrganizationDomain(ORG_DOMAIN)

    settings = AppSettings()
    menu_size = args.size if args.size is not None else settings.menu_size()
    sensitivity = args.sensitivity if args.sensitivity is not None else settings.drag_sensitivity()

    origin = from_qpoint(QCursor.pos())
    screen = QGuiApplication.screenAt(QCursor.pos()) or QGuiApplication.primaryScreen()
    if screen is None:
        log.error("no screen available")
        sys.exit(1)
    area = from_qrect(screen.availableGeometry())

    window = MenuWindow(area, origin, menu_size=menu_size, sensitivity=sensitivity)
    menu = window.popup()

    def report(action: Action, rect: Rect | None) -> None:
        absolute = menu.to_screen(rect) if rect is not None else None
        log.debug("selected %s", format_result(action, absolute))
        print(format_result(action, absolute))

    menu.completed.connect(report)
    menu.closed.connect(app.quit)
    sys.exit(app.exec())
