"""
Shared pytest fixtures for RegionDock tests.
"""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QPointF, QRectF

from RegionDock.dock_model import WindowDescriptor
from RegionDock.docking_manager import DockingManager
from RegionDock.pointer import PointerEvent, PointerEventSource

CONTAINER = QRectF(0, 0, 1000, 800)
WINDOW_WIDTH = 100
WINDOW_HEIGHT = 80


class Content:
    """Stand-in for a window's content handle."""

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"Content({self.name!r})"


@pytest.fixture(autouse=True)
def _qt_app(qapp):
    """Every test runs with a QApplication alive."""
    yield qapp


def make_descriptors(count=3):
    return [
        WindowDescriptor(
            id=i,
            content=Content(f"content-{i}"),
            title=f"Panel {i}",
            geometry=QRectF(200 + 40 * i, 200 + 40 * i, WINDOW_WIDTH, WINDOW_HEIGHT),
        )
        for i in range(count)
    ]


@pytest.fixture
def pointer_source():
    return PointerEventSource()


@pytest.fixture
def manager(pointer_source):
    return DockingManager(make_descriptors(3), CONTAINER, pointer_source)


def press(x, y):
    return PointerEvent(QPointF(x, y))


def drag_window_to(manager, window_id, center, grab=QPointF(20, 10)):
    """Drags a floating window by its header so that its center lands on `center`, then releases."""
    win = manager.window(window_id)
    start = win.position + grab
    assert manager.begin_drag(window_id, press(start.x(), start.y()))
    half = QPointF(win.geometry.width() / 2, win.geometry.height() / 2)
    target = center - half + grab
    manager.pointer_source.dispatch_move(press(target.x(), target.y()))
    candidate = manager.drag_controller.session.candidate
    manager.pointer_source.dispatch_up(press(target.x(), target.y()))
    return candidate


def overlay_center(manager, region):
    return manager.snap_detector.overlays[region].center()


def far_from_overlays():
    """A window center well outside the snap threshold of every default overlay."""
    return QPointF(250, 200)
