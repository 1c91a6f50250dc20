import math
from typing import Optional

from PySide6.QtCore import QRectF, QSizeF

from .config import DEFAULT_CONFIG, DockConfig
from .dock_model import ALL_REGIONS, Region


class SnapDetector:
    """
    Finds the overlay target nearest to a dragged window.

    Each region has one overlay rectangle in container coordinates. A window
    snaps to the region whose overlay center is closest to the window's center,
    provided the distance is strictly below the snap threshold.
    """

    def __init__(self, config: DockConfig = DEFAULT_CONFIG):
        self.config = config
        self.overlays: dict[Region, QRectF] = {region: QRectF() for region in ALL_REGIONS}

    def set_overlay_geometry(self, region: Region, rect: QRectF):
        self.overlays[region] = QRectF(rect)

    def layout_overlays(self, container_size: QSizeF):
        """Places the five overlay icons near the container edges, center icon in the middle."""
        width, height = container_size.width(), container_size.height()
        icon_size = self.config.overlay_icon_size
        margin = self.config.overlay_margin
        center_x = width / 2
        center_y = height / 2

        positions = {
            Region.LEFT: (margin, center_y - icon_size / 2),
            Region.RIGHT: (width - icon_size - margin, center_y - icon_size / 2),
            Region.TOP: (center_x - icon_size / 2, margin),
            Region.BOTTOM: (center_x - icon_size / 2, height - icon_size - margin),
            Region.CENTER: (center_x - icon_size / 2, center_y - icon_size / 2),
        }
        for region, (x, y) in positions.items():
            self.overlays[region] = QRectF(x, y, icon_size, icon_size)

    def distance_to(self, region: Region, bounds: QRectF) -> float:
        window_center = bounds.center()
        overlay_center = self.overlays[region].center()
        return math.hypot(window_center.x() - overlay_center.x(), window_center.y() - overlay_center.y())

    def nearest(self, bounds: QRectF) -> Optional[Region]:
        best = None
        best_distance = self.config.snap_threshold
        for region in ALL_REGIONS:
            distance = self.distance_to(region, bounds)
            # Strict comparison: a distance equal to the threshold never snaps
            # and the first of equal minima wins.
            if distance < best_distance:
                best_distance = distance
                best = region
        return best
