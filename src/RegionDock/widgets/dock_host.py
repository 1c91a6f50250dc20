# dock_host.py

from PySide6.QtCore import Qt, QRect, QRectF
from PySide6.QtWidgets import QWidget, QLabel, QVBoxLayout, QFrame, QTabWidget, QTabBar, QApplication

from ..config import DockConfig
from ..dock_model import ALL_REGIONS, EDGE_REGIONS, Region
from ..docking_manager import DockingManager
from ..layout_engine import splitter_key
from ..pointer import PointerEventSource
from .pointer_bridge import PointerBridge

SPLITTER_THICKNESS = 4

ICON_PROPERTIES = {
    Region.TOP: {"text": "▲", "font-size": "20px"},
    Region.LEFT: {"text": "◀", "font-size": "24px"},
    Region.BOTTOM: {"text": "▼", "font-size": "20px"},
    Region.RIGHT: {"text": "▶", "font-size": "24px"},
    Region.CENTER: {"text": "⧉", "font-size": "20px"},
}


class FloatingFrame(QFrame):
    """A floating window: a header that starts drags and a body that hosts the content widget."""

    def __init__(self, host, window_id: str, title: str):
        super().__init__(host)
        self.host = host
        self.window_id = window_id
        self.setObjectName(f"FloatingFrame_{window_id}")
        self.setFrameShape(QFrame.StyledPanel)
        self.setStyleSheet("FloatingFrame { background-color: #F0F0F0; border: 1px solid #808080; }")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.header = QLabel(title, self)
        self.header.setFixedHeight(int(host.manager.config.title_bar_height))
        self.header.setStyleSheet("background-color: #E0E1E2; color: #101010; padding-left: 6px;")
        self.header.setAttribute(Qt.WA_TransparentForMouseEvents)
        layout.addWidget(self.header)

        self.body = QWidget(self)
        self.body_layout = QVBoxLayout(self.body)
        self.body_layout.setContentsMargins(5, 5, 5, 5)
        layout.addWidget(self.body, 1)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton and event.position().y() <= self.header.height():
            pointer_event = self.host.bridge.to_pointer_event(event, self)
            if self.host.manager.begin_drag(self.window_id, pointer_event):
                event.accept()
                return
        super().mousePressEvent(event)

    def hold_content(self, content):
        if content is not None and content.parentWidget() is not self.body:
            self.body_layout.addWidget(content)
            content.show()


class RegionTabBar(QTabBar):
    """Pressing the active tab pulls its window out of the region."""

    def __init__(self, host, region: Region, parent=None):
        super().__init__(parent)
        self.host = host
        self.region = region

    def mousePressEvent(self, event):
        index = self.tabAt(event.position().toPoint())
        if event.button() == Qt.LeftButton and index != -1:
            window_id = self.tabData(index)
            pointer_event = self.host.bridge.to_pointer_event(event, self)
            if self.host.manager.begin_tab_drag(self.region, window_id, pointer_event):
                event.accept()
                return
        super().mousePressEvent(event)


class RegionView(QTabWidget):
    def __init__(self, host, region: Region):
        super().__init__(host)
        self.region = region
        self.setObjectName(f"Region_{region.value}")
        self.setTabBar(RegionTabBar(host, region, self))
        self._entries: list[tuple[str, str]] = []


class SplitterHandle(QFrame):
    def __init__(self, host, region: Region):
        super().__init__(host)
        self.host = host
        self.region = region
        self.setObjectName(f"Splitter_{region.value}")
        self.setStyleSheet("background-color: #B8B8B8;")
        self.setCursor(Qt.SizeHorCursor if region.axis == "x" else Qt.SizeVerCursor)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            pointer_event = self.host.bridge.to_pointer_event(event, self)
            if self.host.manager.begin_resize(self.region, pointer_event):
                event.accept()
                return
        super().mousePressEvent(event)


class DockHost(QWidget):
    """
    Presents a DockingManager with Qt widgets. Content handles must be
    QWidgets; they are reparented between floating frames and tab pages
    whenever the manager reports a change.
    """

    def __init__(self, descriptors, parent=None, config: DockConfig = None):
        super().__init__(parent)
        self.setObjectName("DockHost")
        self.pointer_source = PointerEventSource()
        self.manager = DockingManager(descriptors, QRectF(self.rect()), self.pointer_source, config, self)
        self.bridge = PointerBridge(self.pointer_source, self, self)
        app = QApplication.instance()
        if app:
            app.installEventFilter(self.bridge)

        self.region_views = {region: RegionView(self, region) for region in ALL_REGIONS}
        for view in self.region_views.values():
            view.currentChanged.connect(lambda index, v=view: self._on_current_changed(v, index))
        self.splitters = {region: SplitterHandle(self, region) for region in EDGE_REGIONS}
        self.frames = {win.id: FloatingFrame(self, win.id, win.header_text()) for win in self.manager.windows()}
        self.overlay_icons = {}
        icon_size = int(self.manager.config.overlay_icon_size)
        for region, props in ICON_PROPERTIES.items():
            icon = QLabel(props["text"], self)
            icon.setAlignment(Qt.AlignCenter)
            icon.setFixedSize(icon_size, icon_size)
            icon.setAttribute(Qt.WA_TransparentForMouseEvents)
            icon.hide()
            self.overlay_icons[region] = icon
        self._syncing = False

        signals = self.manager.signals
        signals.layout_changed.connect(self.sync)
        signals.tab_activated.connect(lambda *_: self.sync())
        signals.overlays_changed.connect(self._sync_overlays)
        signals.window_moved.connect(lambda *_: self._sync_geometry())
        self.manager.layout_engine.parameters_changed.connect(lambda *_: self._sync_geometry())
        self.sync()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.manager.set_container_geometry(QRectF(self.rect()))

    def _on_current_changed(self, view: RegionView, index: int):
        if self._syncing or index < 0:
            return
        self.manager.activate_tab(view.region, view.tabBar().tabData(index))

    def sync(self):
        """Brings every child widget in line with the manager's state."""
        self._syncing = True
        try:
            self._sync_tabs()
            self._sync_frames()
            self._sync_geometry()
        finally:
            self._syncing = False

    def _sync_tabs(self):
        for region, view in self.region_views.items():
            tabs = self.manager.tabs(region)
            wanted = [(entry.window_id, entry.label) for entry in tabs]
            if wanted != view._entries:
                while view.count():
                    view.removeTab(0)
                for entry in tabs:
                    index = view.addTab(entry.panel.content, entry.label)
                    view.tabBar().setTabData(index, entry.window_id)
                view._entries = wanted
            if tabs.active_id is not None:
                view.setCurrentIndex(tabs.window_ids().index(tabs.active_id))

    def _sync_frames(self):
        for win in self.manager.window_stack():
            frame = self.frames[win.id]
            frame.hold_content(win.content)
            frame.setGeometry(win.geometry.toRect())
            frame.setVisible(win.visible)
            frame.raise_()

    def _sync_geometry(self):
        params = self.manager.layout_parameters
        width, height = self.width(), self.height()
        left, right = int(params.left_width), int(params.right_width)
        top, bottom = int(params.top_height), int(params.bottom_height)
        middle = max(0, height - top - bottom)

        rects = {
            Region.TOP: QRect(0, 0, width, top),
            Region.BOTTOM: QRect(0, height - bottom, width, bottom),
            Region.LEFT: QRect(0, top, left, middle),
            Region.RIGHT: QRect(width - right, top, right, middle),
            Region.CENTER: QRect(left, top, max(0, width - left - right), middle),
        }
        for region, view in self.region_views.items():
            view.setGeometry(rects[region])
            view.setVisible(self.manager.layout_engine.is_visible(region))

        half = SPLITTER_THICKNESS // 2
        splitter_rects = {
            Region.LEFT: QRect(left - half, top, SPLITTER_THICKNESS, middle),
            Region.RIGHT: QRect(width - right - half, top, SPLITTER_THICKNESS, middle),
            Region.TOP: QRect(0, top - half, width, SPLITTER_THICKNESS),
            Region.BOTTOM: QRect(0, height - bottom - half, width, SPLITTER_THICKNESS),
        }
        for region, handle in self.splitters.items():
            handle.setGeometry(splitter_rects[region])
            handle.setVisible(self.manager.layout_engine.is_visible(splitter_key(region)))
            handle.raise_()

        for win in self.manager.window_stack():
            frame = self.frames[win.id]
            frame.setGeometry(win.geometry.toRect())
            if win.visible:
                frame.raise_()

    def _sync_overlays(self, visible: bool, highlighted):
        for region, icon in self.overlay_icons.items():
            props = ICON_PROPERTIES[region]
            color = "#5090E0" if region is highlighted else "lightgray"
            icon.setStyleSheet(f"background-color: {color}; border: 1px solid black; font-size: {props['font-size']};")
            icon.setGeometry(self.manager.snap_detector.overlays[region].toRect())
            icon.setVisible(visible)
            if visible:
                icon.raise_()
