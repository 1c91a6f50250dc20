"""
Tunable constants for the RegionDock layout and interaction logic.

Every value the docking core depends on lives in a single frozen
``DockConfig`` so that a host application can adjust the behaviour in one
place and pass the result to ``DockingManager``.
"""

from dataclasses import dataclass, field, replace

from PySide6.QtCore import QSizeF


@dataclass(frozen=True)
class RegionSizing:
    """Sizing law for one pair of edge regions."""
    base: float
    growth: float
    cap_ratio: float
    min_size: float

    def computed_size(self, container_dimension: float, tab_count: int) -> float:
        """Size derived from occupancy. Zero tabs collapse the region."""
        if tab_count <= 0:
            return 0.0
        return min(container_dimension * self.cap_ratio, self.base + (tab_count - 1) * self.growth)

    def clamp(self, size: float) -> float:
        return max(self.min_size, size)


@dataclass(frozen=True)
class DockConfig:
    """Complete configuration of a docking manager."""
    snap_threshold: float = 180.0
    horizontal_sizing: RegionSizing = field(default_factory=lambda: RegionSizing(220.0, 40.0, 0.4, 80.0))
    vertical_sizing: RegionSizing = field(default_factory=lambda: RegionSizing(140.0, 30.0, 0.35, 60.0))
    overlay_icon_size: float = 40.0
    overlay_margin: float = 10.0
    title_bar_height: float = 30.0
    initial_z_order: int = 1000
    default_window_size: QSizeF = field(default_factory=lambda: QSizeF(350, 250))

    def sizing_for(self, region) -> RegionSizing:
        """Returns the sizing law of an edge region ('x' axis edges are left/right)."""
        return self.horizontal_sizing if region.axis == "x" else self.vertical_sizing

    def replace(self, **changes) -> "DockConfig":
        return replace(self, **changes)


DEFAULT_CONFIG = DockConfig()
