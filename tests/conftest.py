"""Shared pytest fixtures."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

from pielayout.core.geometry import Point, Rect  # noqa: E402
from pielayout.core.pie_menu import PieMenu  # noqa: E402
from pielayout.ui.input_grab import InputGrab  # noqa: E402


@pytest.fixture()
def screen() -> Rect:
    """A 1000x800 work area at the origin."""
    return Rect(Point(0, 0), Point(1000, 800))


@pytest.fixture()
def grab() -> InputGrab:
    """Widget-less grab so tests never capture real input."""
    return InputGrab()


@pytest.fixture()
def menu(qapp: QApplication, screen: Rect, grab: InputGrab) -> PieMenu:
    """A 200px menu opened at the centre of *screen*."""
    return PieMenu(screen, Point(500, 400), menu_size=Point(200, 200), grab=grab)
