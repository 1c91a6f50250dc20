from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from PySide6.QtCore import QPointF

from .dock_model import Region
from .docking_state import DockingState
from .pointer import PointerEvent, PointerSubscription

if TYPE_CHECKING:
    from .docking_manager import DockingManager

logger = logging.getLogger(__name__)


@dataclass
class DragSession:
    """Lives from pointer-down to pointer-up of one window drag."""
    window_id: str
    offset: QPointF
    subscription: PointerSubscription
    candidate: Optional[Region] = None


class DragDropController:
    """
    Handles the drag-to-dock interaction for the docking system.

    Every way a drag can finish (dropped on a target, dropped elsewhere,
    pointer capture lost) goes through _finish_session, which is the only
    place the session's pointer subscription is released.
    """

    def __init__(self, manager: DockingManager):
        """
        Initialize with reference to DockingManager for coordination.

        Args:
            manager: Reference to the DockingManager instance
        """
        self.manager = manager
        self.session: Optional[DragSession] = None
        self.state = DockingState.IDLE

    @property
    def is_dragging(self) -> bool:
        return self.session is not None

    def begin(self, window_id: str, event: PointerEvent, from_tab: bool = False) -> bool:
        """
        Starts dragging a window. A docked window is undocked first so that it
        owns its content again before it moves.
        """
        if self.session:
            logger.warning("Drag of '%s' already in progress; ignoring drag of '%s'",
                           self.session.window_id, window_id)
            return False

        manager = self.manager
        win = manager.window(window_id)
        if manager.region_of(win.id) is not None:
            manager.undock(win.id)

        win.visible = True
        origin = manager.container_geometry.topLeft()

        if from_tab:
            # Put the pointer on the title bar, horizontally centred.
            local = event.position - origin
            grab = QPointF(win.geometry.width() / 2, manager.config.title_bar_height / 2)
            win.move_to(_clamped(local - grab))

        offset = event.position - (origin + win.position)
        manager.bring_to_front(win.id)
        manager._set_overlays(True, None)

        subscription = manager.pointer_source.subscribe(self.update, self.end, self.cancel)
        manager.pointer_source.capture(event.target, event.pointer_id)
        self.session = DragSession(window_id=win.id, offset=offset, subscription=subscription)
        self.state = DockingState.DRAGGING_TAB if from_tab else DockingState.DRAGGING_WINDOW
        logger.debug("Drag began for '%s' (%s)", win.id, self.state.name)
        return True

    def begin_tab_drag(self, region, window_id: str, event: PointerEvent) -> bool:
        """
        Pointer-down on a tab. Pressing the active tab pulls the window out into
        a drag; pressing an inactive tab only selects it.
        """
        region = Region.parse(region)
        if region is None:
            logger.warning("Ignoring tab drag from unknown region")
            return False
        tabs = self.manager.tabs(region)
        if not tabs.contains(window_id):
            return False
        if not tabs.is_active(window_id):
            self.manager.activate_tab(region, window_id)
            return False
        return self.begin(window_id, event, from_tab=True)

    def update(self, event: PointerEvent) -> Optional[Region]:
        session = self.session
        if not session:
            logger.warning("Pointer move delivered without an active drag")
            return None

        manager = self.manager
        win = manager.window(session.window_id)
        local = event.position - manager.container_geometry.topLeft() - session.offset
        win.move_to(_clamped(local))
        manager.signals.window_moved.emit(win.id)

        session.candidate = manager.snap_detector.nearest(win.geometry)
        manager._set_overlays(True, session.candidate)
        return session.candidate

    def end(self, event: Optional[PointerEvent] = None) -> Optional[Region]:
        """Drops the window: docks it into the hovered region, or leaves it floating."""
        session = self.session
        if not session:
            logger.warning("Pointer up delivered without an active drag")
            return None

        manager = self.manager
        target = session.candidate
        if target is not None:
            manager.dock(session.window_id, target)
        else:
            manager.placements.clear(session.window_id)
            manager.recompute_layout()

        logger.debug("Drag of '%s' ended on %s", session.window_id, target.value if target else "no target")
        self._finish_session()
        return target

    def cancel(self):
        """External abort such as lost pointer capture. The window stays floating where it is."""
        session = self.session
        if not session:
            return
        logger.debug("Drag of '%s' cancelled", session.window_id)
        self._finish_session()

    def _finish_session(self):
        session, self.session = self.session, None
        self.state = DockingState.IDLE
        self.manager._set_overlays(False, None)
        session.subscription.release()
        self.manager.pointer_source.release_capture()


def _clamped(pos: QPointF) -> QPointF:
    return QPointF(max(0.0, pos.x()), max(0.0, pos.y()))
