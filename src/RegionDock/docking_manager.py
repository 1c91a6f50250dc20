from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from PySide6.QtCore import QObject, QPointF, QRectF, QSizeF, Signal

from .config import DEFAULT_CONFIG, DockConfig
from .dock_model import (ALL_REGIONS, DockWindow, InvalidWindowDescriptorError, PlacementStore, Region,
                         UnknownWindowError, WindowDescriptor)
from .docking_state import DockingState
from .drag_drop_controller import DragDropController
from .layout_engine import LayoutEngine, LayoutParameters
from .pointer import PointerEvent, PointerEventSource
from .snap_detector import SnapDetector
from .splitter_controller import SplitterController
from .tab_container import RegionTabs

logger = logging.getLogger(__name__)

CASCADE_STEP = 30


class DockingSignals(QObject):
    """
    A collection of signals to allow applications to react to layout changes.
    """
    # Emitted whenever a window is docked into a region.
    # Args: window_id, region value
    window_docked = Signal(str, str)

    # Emitted whenever a docked window becomes floating again.
    # Args: window_id
    window_undocked = Signal(str)

    # Args: region value, window_id
    tab_activated = Signal(str, str)

    # Emitted while a dragged window follows the pointer.
    # Args: window_id
    window_moved = Signal(str)

    # Args: overlays shown, highlighted Region or None
    overlays_changed = Signal(bool, object)

    # A general signal emitted whenever placement, tabs or region sizes have changed.
    layout_changed = Signal()


class DockingManager(QObject):
    """
    Owns all docking state: windows, placements, the five region tab
    containers, the layout engine and the two interaction controllers.
    """

    def __init__(self, descriptors: Iterable[WindowDescriptor], container_geometry: QRectF,
                 pointer_source: Optional[PointerEventSource] = None, config: Optional[DockConfig] = None,
                 parent=None):
        super().__init__(parent)
        self.config = config or DEFAULT_CONFIG
        self.signals = DockingSignals()
        self.pointer_source = pointer_source or PointerEventSource()
        self.container_geometry = QRectF(container_geometry)

        self.placements = PlacementStore()
        self.region_tabs: dict[Region, RegionTabs] = {region: RegionTabs(region) for region in ALL_REGIONS}
        self.snap_detector = SnapDetector(self.config)
        self.layout_engine = LayoutEngine(self.config, self)
        self.drag_controller = DragDropController(self)
        self.splitter_controller = SplitterController(self.layout_engine, self.pointer_source, self.config)
        self.layout_engine.parameters_changed.connect(self._on_parameters_changed)

        self.overlays_visible = False
        self.highlighted_region: Optional[Region] = None
        self._z_counter = self.config.initial_z_order

        self._windows: dict[str, DockWindow] = {}
        self._initial_geometry: dict[str, QRectF] = {}
        self._register_windows(list(descriptors))

        self.snap_detector.layout_overlays(self.container_size)
        self.recompute_layout()

    # --- Initialisation ---

    def _register_windows(self, descriptors: list[WindowDescriptor]):
        """Validates every descriptor before tracking any of them."""
        seen = set()
        for descriptor in descriptors:
            if descriptor.id is None or str(descriptor.id).strip() == "":
                raise InvalidWindowDescriptorError("Window descriptor is missing an id")
            window_id = str(descriptor.id)
            if descriptor.content is None:
                raise InvalidWindowDescriptorError(f"Window '{window_id}' has no content handle")
            if window_id in seen:
                raise InvalidWindowDescriptorError(f"Window id '{window_id}' is used more than once")
            seen.add(window_id)

        for index, descriptor in enumerate(descriptors):
            if descriptor.geometry is not None and descriptor.geometry.isValid():
                geometry = QRectF(descriptor.geometry)
            else:
                offset = index * CASCADE_STEP
                geometry = QRectF(QPointF(offset, offset), self.config.default_window_size)
            window_id = str(descriptor.id)
            win = DockWindow(
                id=window_id,
                content=descriptor.content,
                title=descriptor.title,
                geometry=QRectF(geometry),
                original_size=QSizeF(geometry.size()),
            )
            self._windows[window_id] = win
            self._initial_geometry[window_id] = QRectF(geometry)
            self.bring_to_front(window_id)
        logger.debug("Registered %d window(s)", len(self._windows))

    def reset(self):
        """Returns every window to its initial floating geometry and forgets splitter overrides."""
        self.drag_controller.cancel()
        self.splitter_controller.cancel()
        for window_id, region in self.placements.items():
            self.region_tabs[region].remove_window(self._windows[window_id])
        self.placements.reset()
        self.layout_engine.clear_overrides()
        self._z_counter = self.config.initial_z_order
        for window_id, win in self._windows.items():
            win.geometry = QRectF(self._initial_geometry[window_id])
            win.visible = True
            self.bring_to_front(window_id)
        self.recompute_layout()
        self.signals.layout_changed.emit()

    # --- Queries ---

    def window(self, window_id) -> DockWindow:
        try:
            return self._windows[str(window_id)]
        except KeyError:
            raise UnknownWindowError(window_id) from None

    def windows(self) -> list[DockWindow]:
        return list(self._windows.values())

    def window_stack(self) -> list[DockWindow]:
        """Windows from bottom to top of the stacking order."""
        return sorted(self._windows.values(), key=lambda w: w.z_order)

    def region_of(self, window_id) -> Optional[Region]:
        return self.placements.region_of(self.window(window_id).id)

    def tabs(self, region) -> RegionTabs:
        return self.region_tabs[Region(region)]

    def counts(self) -> dict[Region, int]:
        return {region: tabs.count() for region, tabs in self.region_tabs.items()}

    @property
    def container_size(self) -> QSizeF:
        return self.container_geometry.size()

    @property
    def layout_parameters(self) -> LayoutParameters:
        return self.layout_engine.parameters

    @property
    def visibility(self) -> dict:
        return dict(self.layout_engine.visibility)

    @property
    def state(self) -> DockingState:
        if self.splitter_controller.is_active:
            return DockingState.RESIZING_REGION
        return self.drag_controller.state

    def content_location(self, window_id) -> tuple[str, Optional[Region]]:
        """Where the window's content currently lives: ('window', None) or ('panel', region)."""
        win = self.window(window_id)
        region = self.placements.region_of(win.id)
        if region is not None:
            return "panel", region
        return "window", None

    # --- Commands ---

    def bring_to_front(self, window_id) -> int:
        win = self.window(window_id)
        self._z_counter += 1
        win.z_order = self._z_counter
        return win.z_order

    def dock(self, window_id, region) -> bool:
        """
        Docks a window into a region as a new active tab. Unknown regions are
        ignored; re-docking into the current region only activates the tab.
        """
        target = Region.parse(region)
        if target is None:
            logger.warning("Ignoring dock of '%s' into unknown region %r", window_id, region)
            return False

        win = self.window(window_id)
        current = self.placements.region_of(win.id)
        if current is target:
            self.activate_tab(target, win.id)
            return True
        if current is not None:
            self._remove_from_region(win, current)

        win.visible = False
        self.placements.place(win.id, target)
        self.region_tabs[target].add_window(win)
        logger.debug("Docked '%s' into %s", win.id, target.value)

        self.recompute_layout()
        self.signals.window_docked.emit(win.id, target.value)
        self.signals.layout_changed.emit()
        return True

    def undock(self, window_id) -> bool:
        """Turns a docked window back into a floating one at its original size."""
        win = self.window(window_id)
        region = self.placements.region_of(win.id)
        if region is None:
            return False

        self._remove_from_region(win, region)
        win.restore_original_size()
        win.visible = True
        self.bring_to_front(win.id)
        logger.debug("Undocked '%s' from %s", win.id, region.value)

        self.recompute_layout()
        self.signals.window_undocked.emit(win.id)
        self.signals.layout_changed.emit()
        return True

    def _remove_from_region(self, win: DockWindow, region: Region):
        self.region_tabs[region].remove_window(win)
        self.placements.clear(win.id)

    def activate_tab(self, region, window_id) -> bool:
        target = Region.parse(region)
        if target is None:
            return False
        if not self.region_tabs[target].activate(str(window_id)):
            return False
        self.signals.tab_activated.emit(target.value, str(window_id))
        return True

    def set_container_geometry(self, geometry: QRectF):
        self.container_geometry = QRectF(geometry)
        self.snap_detector.layout_overlays(self.container_size)
        self.recompute_layout()
        self.signals.layout_changed.emit()

    def recompute_layout(self) -> LayoutParameters:
        return self.layout_engine.recompute(self.container_size, self.counts())

    # --- Interaction entry points ---

    def begin_drag(self, window_id, event: PointerEvent) -> bool:
        if self.splitter_controller.is_active:
            logger.warning("Cannot start a window drag while a splitter is being dragged")
            return False
        return self.drag_controller.begin(str(window_id), event)

    def begin_tab_drag(self, region, window_id, event: PointerEvent) -> bool:
        if self.splitter_controller.is_active or self.drag_controller.is_dragging:
            logger.warning("Ignoring tab press while another interaction is active")
            return False
        return self.drag_controller.begin_tab_drag(region, str(window_id), event)

    def begin_resize(self, region, event: PointerEvent) -> bool:
        if self.drag_controller.is_dragging:
            logger.warning("Cannot start a splitter drag while a window is being dragged")
            return False
        return self.splitter_controller.begin(region, event)

    # --- Internal notifications ---

    def _set_overlays(self, visible: bool, highlighted: Optional[Region]):
        changed = visible != self.overlays_visible or highlighted is not self.highlighted_region
        self.overlays_visible = visible
        self.highlighted_region = highlighted if visible else None
        if changed:
            self.signals.overlays_changed.emit(self.overlays_visible, self.highlighted_region)

    def _on_parameters_changed(self, _parameters):
        if self.splitter_controller.is_active:
            self.signals.layout_changed.emit()

    # --- Diagnostics ---

    def describe_layout(self) -> str:
        """Returns a readable dump of placement, tabs and region sizes."""
        lines = ["--- DOCKING LAYOUT STATE ---"]
        params = self.layout_parameters
        lines.append(f"  Sizes: left={params.left_width:.0f} right={params.right_width:.0f} "
                     f"top={params.top_height:.0f} bottom={params.bottom_height:.0f}")
        for region in ALL_REGIONS:
            tabs = self.region_tabs[region]
            if not tabs.count():
                continue
            lines.append(f"  [{region.value}] Tabs: {tabs.count()}")
            for entry in tabs:
                marker = "*" if entry.active else " "
                lines.append(f"    {marker} '{entry.label}' (id: {entry.window_id})")
        floating = [w for w in self.window_stack() if self.placements.region_of(w.id) is None]
        if floating:
            lines.append("  [floating]")
            for win in floating:
                pos = win.position
                lines.append(f"      '{win.header_text()}' at ({pos.x():.0f}, {pos.y():.0f}) z={win.z_order}")
        return "\n".join(lines)

    def log_layout(self):
        logger.debug("\n%s", self.describe_layout())

    def content_owner_count(self, content: Any) -> int:
        """Number of places (windows and tab panels) currently holding this content handle."""
        owners = sum(1 for w in self._windows.values() if w.content is content)
        for tabs in self.region_tabs.values():
            owners += sum(1 for entry in tabs if entry.panel.content is content)
        return owners
