"""
Pointer event plumbing for interaction sessions.

Drag and splitter sessions only listen for move/up while they are active.
``PointerEventSource.subscribe`` hands out a ``PointerSubscription`` at
session begin; the session's single teardown routine releases it. Releasing
is exactly-once, so every exit path (commit, cancel, lost capture) can call
it without double-removing listeners.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from PySide6.QtCore import QPointF

logger = logging.getLogger(__name__)

PointerCallback = Callable[["PointerEvent"], None]


@dataclass(frozen=True)
class PointerEvent:
    """A pointer sample in host (screen) coordinates."""
    position: QPointF
    pointer_id: int = 0
    target: Any = None

    def x(self) -> float:
        return self.position.x()

    def y(self) -> float:
        return self.position.y()

    def coordinate(self, axis: str) -> float:
        return self.position.x() if axis == "x" else self.position.y()


class PointerSubscription:
    """Move/up/cancel listeners held by one session."""

    def __init__(self, source: "PointerEventSource", on_move: PointerCallback, on_up: PointerCallback,
                 on_cancel: Optional[Callable[[], None]] = None):
        self._source = source
        self.on_move = on_move
        self.on_up = on_up
        self.on_cancel = on_cancel
        self.released = False

    def release(self):
        if self.released:
            return
        self.released = True
        self._source._remove(self)


class PointerEventSource:
    """Fan-out point for pointer move/up/cancel events coming from the host."""

    def __init__(self):
        self._subscriptions: list[PointerSubscription] = []
        self.captured_target = None
        self.captured_pointer_id: Optional[int] = None

    def subscribe(self, on_move: PointerCallback, on_up: PointerCallback,
                  on_cancel: Optional[Callable[[], None]] = None) -> PointerSubscription:
        subscription = PointerSubscription(self, on_move, on_up, on_cancel)
        self._subscriptions.append(subscription)
        return subscription

    def _remove(self, subscription: PointerSubscription):
        self._subscriptions = [s for s in self._subscriptions if s is not subscription]

    def subscription_count(self) -> int:
        return len(self._subscriptions)

    def capture(self, target, pointer_id: int = 0):
        self.captured_target = target
        self.captured_pointer_id = pointer_id

    def release_capture(self):
        self.captured_target = None
        self.captured_pointer_id = None

    # Listeners may release themselves while being notified, so iterate over a snapshot.

    def dispatch_move(self, event: PointerEvent):
        for subscription in list(self._subscriptions):
            if not subscription.released:
                subscription.on_move(event)

    def dispatch_up(self, event: PointerEvent):
        for subscription in list(self._subscriptions):
            if not subscription.released:
                subscription.on_up(event)

    def dispatch_cancel(self):
        """Pointer capture was lost; every active session must abort."""
        if self._subscriptions:
            logger.debug("Pointer capture lost with %d active subscription(s)", len(self._subscriptions))
        for subscription in list(self._subscriptions):
            if not subscription.released and subscription.on_cancel:
                subscription.on_cancel()
        self.release_capture()
