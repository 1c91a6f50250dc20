from PySide6.QtCore import QEvent, QObject
from PySide6.QtWidgets import QWidget

from ..pointer import PointerEvent, PointerEventSource


class PointerBridge(QObject):
    """
    Event filter that feeds Qt mouse events into a PointerEventSource.

    Install it on the application so moves and releases reach the active
    session wherever the cursor is. Positions are mapped into the host
    widget's coordinates, which is the coordinate space of the docking core.
    """

    def __init__(self, source: PointerEventSource, host: QWidget, parent=None):
        super().__init__(parent)
        self.source = source
        self.host = host

    def to_pointer_event(self, event, target=None) -> PointerEvent:
        position = self.host.mapFromGlobal(event.globalPosition())
        return PointerEvent(position=position, target=target)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if not self.source.subscription_count():
            return False

        event_type = event.type()
        if event_type == QEvent.Type.MouseMove:
            self.source.dispatch_move(self.to_pointer_event(event, watched))
            return True
        if event_type == QEvent.Type.MouseButtonRelease:
            self.source.dispatch_up(self.to_pointer_event(event, watched))
            return True
        if event_type in (QEvent.Type.UngrabMouse, QEvent.Type.WindowDeactivate):
            self.source.dispatch_cancel()
        return False
