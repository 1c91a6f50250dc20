from enum import Enum, auto


class DockingState(Enum):
    """Interaction state of the docking system."""
    IDLE = auto()
    DRAGGING_WINDOW = auto()
    DRAGGING_TAB = auto()
    RESIZING_REGION = auto()

    @property
    def is_dragging(self) -> bool:
        return self in (DockingState.DRAGGING_WINDOW, DockingState.DRAGGING_TAB)
