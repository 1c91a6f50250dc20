from .dock_host import DockHost
from .pointer_bridge import PointerBridge

__all__ = ["DockHost", "PointerBridge"]
