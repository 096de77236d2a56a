"""Tests for the PieMenu state machine."""

from __future__ import annotations

import pytest
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication

from pielayout.core.geometry import Point, Rect
from pielayout.core.pie_menu import Action, MenuState, PieMenu
from pielayout.core.selection import (
    MINIMIZE_SELECTION,
    UNSELECTED,
    InnerSelection,
    Location,
    Ring,
    Selection,
)
from pielayout.ui.input_grab import InputGrab

ORIGIN = Point(500, 400)


def _at(dx: int, dy: int) -> Point:
    """Absolute position *dx*, *dy* away from the menu centre."""
    return Point(ORIGIN.x + dx, ORIGIN.y + dy)


class _Recorder:
    def __init__(self, menu: PieMenu) -> None:
        self.results: list[tuple[Action, Rect | None]] = []
        self.selections: list[Selection] = []
        self.previews: list[Rect | None] = []
        self.closed = 0
        menu.completed.connect(lambda action, rect: self.results.append((action, rect)))
        menu.selection_changed.connect(self.selections.append)
        menu.preview_changed.connect(self.previews.append)
        menu.closed.connect(self._on_closed)

    def _on_closed(self) -> None:
        self.closed += 1


@pytest.fixture()
def recorder(menu: PieMenu) -> _Recorder:
    return _Recorder(menu)


# --- construction ---


def test_menu_starts_open(menu: PieMenu, grab: InputGrab) -> None:
    assert menu.state == MenuState.OPEN
    assert menu.selection == UNSELECTED
    assert menu.preview_rect is None
    assert grab.held


def test_default_menu_size(qapp: QApplication, screen: Rect) -> None:
    menu = PieMenu(screen, ORIGIN)
    assert menu.geometry.outer_radius == 94
    menu.destroy()


# --- selecting ---


def test_mouse_move_selects_sector(menu: PieMenu, recorder: _Recorder) -> None:
    assert menu.mouse_move(_at(-60, 0))
    assert menu.selection == Selection(Ring.OUTER, Location.LEFT)
    assert recorder.selections == [Selection(Ring.OUTER, Location.LEFT)]
    assert menu.preview_rect == Rect(Point(0, 0), Point(500, 800))
    assert recorder.previews == [Rect(Point(0, 0), Point(500, 800))]


def test_same_sector_notifies_once(menu: PieMenu, recorder: _Recorder) -> None:
    menu.mouse_move(_at(50, 0))
    menu.mouse_move(_at(60, 1))
    menu.mouse_move(_at(70, -2))
    assert recorder.selections == [Selection(Ring.OUTER, Location.RIGHT)]
    assert len(recorder.previews) == 1


def test_each_sector_change_notifies(menu: PieMenu, recorder: _Recorder) -> None:
    menu.mouse_move(_at(50, 0))
    menu.mouse_move(_at(0, 50))
    menu.mouse_move(_at(2, 2))
    assert recorder.selections == [
        Selection(Ring.OUTER, Location.RIGHT),
        Selection(Ring.OUTER, Location.BOTTOM),
        UNSELECTED,
    ]
    assert recorder.previews[-1] is None


def test_preview_rect_is_a_copy(menu: PieMenu) -> None:
    menu.mouse_move(_at(-60, 0))
    rect = menu.preview_rect
    assert rect is not None
    rect.size.x = 1
    assert menu.preview_rect == Rect(Point(0, 0), Point(500, 800))


# --- tracking ---


def test_tracking_requires_outer_selection(menu: PieMenu) -> None:
    assert not menu.start_tracking()
    assert menu.state == MenuState.OPEN

    menu.mouse_move(_at(0, -20))
    assert menu.selection == Selection(Ring.INNER, InnerSelection.MAXIMIZE)
    assert not menu.start_tracking()
    assert menu.state == MenuState.OPEN
    assert menu.tracking_location is None


def test_track_key_without_selection_is_consumed(menu: PieMenu, recorder: _Recorder) -> None:
    assert menu.key_press(Qt.Key.Key_Shift)
    assert menu.state == MenuState.OPEN
    assert recorder.results == []


def test_tracking_drags_opposite_edge(menu: PieMenu, recorder: _Recorder) -> None:
    started: list[Location] = []
    menu.tracking_started.connect(started.append)
    menu.mouse_move(_at(-60, 0))
    assert menu.key_press(Qt.Key.Key_Shift)
    assert menu.state == MenuState.TRACKING
    assert menu.tracking_location == Location.RIGHT
    assert started == [Location.RIGHT]

    menu.mouse_move(_at(-50, 0))
    assert menu.preview_rect == Rect(Point(0, 0), Point(522, 800))
    # Selection is frozen while dragging
    menu.mouse_move(_at(60, 60))
    assert menu.selection == Selection(Ring.OUTER, Location.LEFT)
    assert len(recorder.selections) == 1


def test_tracking_preview_notified_on_every_move(menu: PieMenu, recorder: _Recorder) -> None:
    menu.mouse_move(_at(-60, 0))
    menu.start_tracking()
    menu.mouse_move(_at(-60, 0))
    menu.mouse_move(_at(-60, 0))
    # One for the selection, two while tracking
    assert len(recorder.previews) == 3
    assert recorder.previews[-1] == Rect(Point(0, 0), Point(500, 800))


def test_tracking_clips_to_screen(menu: PieMenu) -> None:
    menu.mouse_move(_at(0, 60))
    assert menu.selection == Selection(Ring.OUTER, Location.BOTTOM)
    menu.start_tracking()
    assert menu.tracking_location == Location.TOP
    menu.mouse_move(_at(0, -140))
    assert menu.preview_rect == Rect(Point(0, 0), Point(1000, 800))


def test_corner_tracking(menu: PieMenu) -> None:
    menu.mouse_move(_at(40, 40))
    menu.start_tracking()
    assert menu.tracking_location == Location.TOPLEFT
    menu.mouse_move(_at(30, 30))
    # Bottom-right quarter, top-left corner pulled up and left by 22px
    assert menu.preview_rect == Rect(Point(478, 378), Point(522, 422))


def test_second_track_key_is_ignored(menu: PieMenu) -> None:
    menu.mouse_move(_at(-60, 0))
    menu.start_tracking()
    assert not menu.start_tracking()
    assert menu.key_press(Qt.Key.Key_Shift)
    assert menu.state == MenuState.TRACKING
    assert menu.tracking_location == Location.RIGHT


# --- completion ---


def test_commit_resize_after_drag(menu: PieMenu, recorder: _Recorder, grab: InputGrab) -> None:
    menu.mouse_move(_at(-60, 0))
    menu.start_tracking()
    menu.mouse_move(_at(-50, 0))
    assert menu.button_press()
    assert menu.state == MenuState.COMPLETED
    assert recorder.results == [(Action.RESIZE, Rect(Point(0, 0), Point(522, 800)))]
    assert recorder.closed == 1
    assert grab.released


def test_commit_outer_sector_without_drag(menu: PieMenu, recorder: _Recorder) -> None:
    menu.mouse_move(_at(0, -60))
    menu.commit()
    assert recorder.results == [(Action.RESIZE, Rect(Point(0, 0), Point(1000, 400)))]


def test_commit_maximize(menu: PieMenu, recorder: _Recorder) -> None:
    menu.mouse_move(_at(0, -20))
    menu.commit()
    assert recorder.results == [(Action.RESIZE, Rect(Point(0, 0), Point(1000, 800)))]


def test_commit_minimize(menu: PieMenu, recorder: _Recorder) -> None:
    menu.mouse_move(_at(0, 20))
    assert menu.selection == MINIMIZE_SELECTION
    menu.commit()
    assert recorder.results == [(Action.MINIMIZE, None)]


def test_minimize_wins_over_pending_rect(menu: PieMenu, recorder: _Recorder) -> None:
    menu.mouse_move(_at(0, 20))
    menu._preview = Rect(Point(1, 2), Point(3, 4))  # noqa: SLF001
    menu.commit()
    assert recorder.results == [(Action.MINIMIZE, None)]


def test_commit_with_nothing_selected_closes_silently(
    menu: PieMenu, recorder: _Recorder, grab: InputGrab
) -> None:
    menu.commit()
    assert recorder.results == []
    assert recorder.closed == 1
    assert menu.state == MenuState.COMPLETED
    assert grab.released


def test_cancel_key(menu: PieMenu, recorder: _Recorder) -> None:
    menu.mouse_move(_at(-60, 0))
    assert menu.key_press(Qt.Key.Key_Escape)
    assert recorder.results == [(Action.CANCEL, None)]
    assert menu.state == MenuState.COMPLETED


def test_cancel_while_tracking(menu: PieMenu, recorder: _Recorder) -> None:
    menu.mouse_move(_at(-60, 0))
    menu.start_tracking()
    menu.mouse_move(_at(-40, 0))
    menu.cancel()
    assert recorder.results == [(Action.CANCEL, None)]


def test_other_keys_are_ignored(menu: PieMenu, recorder: _Recorder) -> None:
    assert not menu.key_press(Qt.Key.Key_A)
    assert not menu.key_press(Qt.Key.Key_Space)
    assert menu.state == MenuState.OPEN
    assert recorder.results == []


def test_completion_happens_once(menu: PieMenu, recorder: _Recorder, grab: InputGrab) -> None:
    menu.cancel()
    menu.cancel()
    menu.commit()
    menu.destroy()
    assert recorder.results == [(Action.CANCEL, None)]
    assert recorder.closed == 1
    assert not grab.held


def test_events_after_completion_are_not_consumed(menu: PieMenu, recorder: _Recorder) -> None:
    menu.cancel()
    assert not menu.mouse_move(_at(-60, 0))
    assert not menu.key_press(Qt.Key.Key_Escape)
    assert not menu.button_press()
    assert menu.selection == UNSELECTED
    assert recorder.selections == []


def test_destroy_releases_without_callback(
    menu: PieMenu, recorder: _Recorder, grab: InputGrab
) -> None:
    menu.mouse_move(_at(-60, 0))
    menu.destroy()
    assert recorder.results == []
    assert recorder.closed == 1
    assert grab.released


def test_on_select_callback(qapp: QApplication, screen: Rect) -> None:
    results: list[tuple[Action, Rect | None]] = []
    menu = PieMenu(screen, ORIGIN, on_select=lambda a, r: results.append((a, r)))
    menu.mouse_move(_at(0, 20))
    menu.button_press()
    assert results == [(Action.MINIMIZE, None)]


# --- screen offset ---


def test_rects_are_relative_to_screen(qapp: QApplication) -> None:
    screen = Rect(Point(1920, 100), Point(1000, 800))
    origin = Point(2420, 500)
    menu = PieMenu(screen, origin)
    menu.mouse_move(Point(origin.x + 60, origin.y))
    rect = menu.preview_rect
    assert rect == Rect(Point(500, 0), Point(500, 800))
    assert menu.to_screen(rect) == Rect(Point(2420, 100), Point(500, 800))
    menu.destroy()
