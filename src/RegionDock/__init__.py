from .config import DockConfig, RegionSizing
from .dock_model import (Region, WindowDescriptor, DockWindow, PlacementStore,
                         InvalidWindowDescriptorError, UnknownWindowError)
from .docking_manager import DockingManager, DockingSignals
from .docking_state import DockingState
from .layout_engine import LayoutEngine, LayoutParameters
from .pointer import PointerEvent, PointerEventSource
from .snap_detector import SnapDetector
from .tab_container import RegionTabs

__all__ = [
    "DockConfig", "RegionSizing",
    "Region", "WindowDescriptor", "DockWindow", "PlacementStore",
    "InvalidWindowDescriptorError", "UnknownWindowError",
    "DockingManager", "DockingSignals", "DockingState",
    "LayoutEngine", "LayoutParameters",
    "PointerEvent", "PointerEventSource",
    "SnapDetector", "RegionTabs",
]
