from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional

from PySide6.QtCore import QObject, QSizeF, Signal

from .config import DEFAULT_CONFIG, DockConfig
from .dock_model import ALL_REGIONS, EDGE_REGIONS, Region

logger = logging.getLogger(__name__)

_FIELD_FOR_REGION = {
    Region.LEFT: "left_width",
    Region.RIGHT: "right_width",
    Region.TOP: "top_height",
    Region.BOTTOM: "bottom_height",
}


def splitter_key(region: Region) -> str:
    """Key of an edge splitter in the visibility map."""
    return f"splitter:{region.value}"


@dataclass(frozen=True)
class LayoutParameters:
    """The four numbers the presentation layer needs to size the region grid."""
    left_width: float = 0.0
    right_width: float = 0.0
    top_height: float = 0.0
    bottom_height: float = 0.0

    def get(self, region: Region) -> float:
        return getattr(self, _FIELD_FOR_REGION[region])

    def with_value(self, region: Region, value: float) -> LayoutParameters:
        return replace(self, **{_FIELD_FOR_REGION[region]: value})


class LayoutEngine(QObject):
    """
    Derives edge region sizes from tab occupancy, the container size and
    splitter overrides.

    Once a splitter has been dragged for a region, its override wins over the
    occupancy formula for the rest of the session.
    """
    parameters_changed = Signal(object)
    visibility_changed = Signal(object)

    def __init__(self, config: DockConfig = DEFAULT_CONFIG, parent=None):
        super().__init__(parent)
        self.config = config
        self.parameters = LayoutParameters()
        self.visibility: dict = {}
        self._overrides: dict[Region, float] = {}

    def size_for(self, region: Region, container_size: QSizeF, count: int) -> float:
        if count <= 0:
            return 0.0
        if region in self._overrides:
            return self._overrides[region]
        sizing = self.config.sizing_for(region)
        dimension = container_size.width() if region.axis == "x" else container_size.height()
        return sizing.computed_size(dimension, count)

    def recompute(self, container_size: QSizeF, counts: dict[Region, int]) -> LayoutParameters:
        params = LayoutParameters()
        for region in EDGE_REGIONS:
            params = params.with_value(region, self.size_for(region, container_size, counts.get(region, 0)))

        visibility = {}
        for region in ALL_REGIONS:
            visibility[region] = region is Region.CENTER or counts.get(region, 0) > 0
        for region in EDGE_REGIONS:
            visibility[splitter_key(region)] = counts.get(region, 0) > 0

        self.parameters = params
        self.visibility = visibility
        logger.debug("Layout recomputed: %s", params)
        self.parameters_changed.emit(params)
        self.visibility_changed.emit(dict(visibility))
        return params

    def current(self, region: Region) -> float:
        return self.parameters.get(region)

    def set_live(self, region: Region, value: float):
        """Writes a size straight into the live parameters, bypassing the occupancy formula."""
        self.parameters = self.parameters.with_value(region, value)
        self.parameters_changed.emit(self.parameters)

    def set_override(self, region: Region, value: float):
        self._overrides[region] = value

    def override(self, region: Region) -> Optional[float]:
        return self._overrides.get(region)

    def clear_overrides(self):
        self._overrides.clear()

    def is_visible(self, key) -> bool:
        return bool(self.visibility.get(key, False))
